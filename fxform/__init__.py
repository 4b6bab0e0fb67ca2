"""Currency conversion form: rate table, observable state and commands."""

from .main import create_view_model
from .viewmodels.main import FormState, MainViewModel

__all__ = ["create_view_model", "FormState", "MainViewModel"]
