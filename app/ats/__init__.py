from .checker import check_ats_compliance, closing_suggestions, extract_contact_info

__all__ = [
    "check_ats_compliance",
    "closing_suggestions",
    "extract_contact_info",
]
