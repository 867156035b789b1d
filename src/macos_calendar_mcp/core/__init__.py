"""Script synthesis, date conversion and reply parsing."""

from . import dates, parser
from .scripts import DETAILED_FIELDS, WEEK_FIELDS, ScriptBuilder, quote

__all__ = ["DETAILED_FIELDS", "WEEK_FIELDS", "ScriptBuilder", "dates", "parser", "quote"]
