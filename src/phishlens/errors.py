class PhishLensError(Exception):
    """Base class for errors raised by phishlens."""


class ImageDecodeError(PhishLensError):
    """Uploaded bytes could not be decoded as an image."""


class RegionOutOfBoundsError(PhishLensError, ValueError):
    """Requested rectangle is not fully inside the image."""


class FeatureLengthMismatchError(PhishLensError, ValueError):
    """Two feature vectors of different length were compared."""


class DuplicateDomainError(PhishLensError):
    """A website with the same domain is already stored."""

    def __init__(self, domain: str):
        super().__init__(f"Website with domain '{domain}' already exists")
        self.domain = domain


class AnalysisError(PhishLensError):
    """Analysis of an uploaded screenshot failed."""
