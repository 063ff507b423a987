"""Known legitimate login pages and their reference feature vectors."""

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import NewWebsite

# Simulated vectors, ordered like features.FEATURE_NAMES
REFERENCE_FEATURES: Mapping[str, Tuple[float, ...]] = MappingProxyType(
    {
        "facebook.com": (59, 89, 152, 235, 235, 235, 240, 240, 240, 0.2, 0.12, 0.85),
        "google.com": (66, 133, 244, 255, 255, 255, 240, 240, 240, 0.1, 0.08, 0.92),
        "amazon.com": (254, 153, 0, 240, 240, 240, 240, 240, 240, 0.15, 0.1, 0.88),
        "microsoft.com": (0, 120, 215, 255, 255, 255, 242, 242, 242, 0.12, 0.09, 0.9),
        "apple.com": (50, 50, 50, 250, 250, 250, 245, 245, 245, 0.08, 0.07, 0.89),
    }
)

KNOWN_WEBSITES: Tuple[NewWebsite, ...] = (
    NewWebsite(
        name="Facebook",
        domain="facebook.com",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/thumb/5/51/Facebook_f_logo_%282019%29.svg/240px-Facebook_f_logo_%282019%29.svg.png",
        reference_image_url="https://about.fb.com/wp-content/uploads/2019/11/facebook-login.png?resize=720%2C487",
    ),
    NewWebsite(
        name="Google",
        domain="google.com",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/thumb/5/53/Google_%22G%22_Logo.svg/240px-Google_%22G%22_Logo.svg.png",
        reference_image_url="https://storage.googleapis.com/gweb-uniblog-publish-prod/images/google-signin.max-2000x2000.jpg",
    ),
    NewWebsite(
        name="Amazon",
        domain="amazon.com",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/thumb/a/a9/Amazon_logo.svg/320px-Amazon_logo.svg.png",
        reference_image_url="https://m.media-amazon.com/images/G/01/VSEO/signin._CB1565291945_.jpeg",
    ),
    NewWebsite(
        name="Microsoft",
        domain="microsoft.com",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/thumb/4/44/Microsoft_logo.svg/320px-Microsoft_logo.svg.png",
        reference_image_url="https://img-prod-cms-rt-microsoft-com.akamaized.net/cms/api/am/imageFileData/RWDeEK",
    ),
    NewWebsite(
        name="Apple",
        domain="apple.com",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/thumb/f/fa/Apple_logo_black.svg/240px-Apple_logo_black.svg.png",
        reference_image_url="https://support.apple.com/library/content/dam/edam/applecare/images/en_US/mac_apps/mac-sign-in-window-macos-monterey.png",
    ),
)
