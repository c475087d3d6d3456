from .rules import RULES, ClassificationRule, classify, matching_rules

__all__ = ["RULES", "ClassificationRule", "classify", "matching_rules"]
