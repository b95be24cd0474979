"""Page objects for the Rediff account-creation flow."""

from rediff_ui.pages.create_account import CreateAccountPage
from rediff_ui.pages.home import HomePage

__all__ = ["CreateAccountPage", "HomePage"]
