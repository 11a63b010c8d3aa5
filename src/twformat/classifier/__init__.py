from twformat.classifier.classify import classify, variant_base
from twformat.classifier.rules import CATEGORY_RULES

__all__ = ["CATEGORY_RULES", "classify", "variant_base"]
