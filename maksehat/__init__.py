"""Mental-health self-assessment questionnaire with scoring, categorisation and a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]