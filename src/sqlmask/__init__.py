"""
sqlmask – dynamic data-masking rule builder for SQL databases.

Import path convention::

    from sqlmask.masking import MaskingRule, RuleInput, build_updated_rule_set
    from sqlmask.masking.placement import CreateRule, UpdateRule
    from sqlmask.application.masking import SetMaskingRule, SetMaskingRuleHandler
    from sqlmask.kernel.errors import DomainError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
