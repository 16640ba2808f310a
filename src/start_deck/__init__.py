"""StartDeck - Personal start-page dashboard.

Clock, weather, links and notes on one page.
"""

PROJECT_NAME = "StartDeck"
PROJECT_TAGLINE = "Clock, weather, links and notes on one page."
PACKAGE_NAME = "start_deck"
__version__ = "0.1.0"

__all__ = ["PROJECT_NAME", "PROJECT_TAGLINE", "PACKAGE_NAME", "__version__"]
