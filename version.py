"""
Version information for the Wellington Trains application.

Centralized version management for the application and its About dialog.
"""

# Core application information
__version__ = "1.1.0"
__version_info__ = (1, 1, 0)
__app_name__ = "WellingtonTrains"
__app_display_name__ = "Wellington Trains - Regional Stations, Lines & Services"
__author__ = "Wellington Trains contributors"
__company__ = "Wellington Trains"
__copyright__ = "© 2025 Wellington Trains contributors"
__description__ = "Browse Wellington regional train stations, lines and service times"

# Feature information
__features__ = [
    "Alphabetical station and train line listings",
    "Train lines available at each station",
    "Stations visited by each train line, in travel order",
    "Service times by train line and by station",
    "Route check between two stations",
    "Dark/Light theme support",
]

# Data information
__data_format__ = "Whitespace-delimited .data files"
__data_region__ = "Wellington, New Zealand"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_about_text() -> str:
    """Get formatted about text for dialogs."""
    features_list = "\n".join(f"<li>{feature}</li>" for feature in __features__)

    return f"""
<h3>🚆 {__app_display_name__}</h3>
<p><b>Version {__version__}</b></p>
<p><b>Author: {__author__}</b></p>
<p>{__description__}</p>

<p><b>Features:</b></p>
<ul>
{features_list}
</ul>

<p><b>Data:</b> {__data_region__}, loaded from {__data_format__}</p>

<p>{__copyright__}</p>
"""
