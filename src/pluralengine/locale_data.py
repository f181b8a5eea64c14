"""CLDR plural rule descriptions from Babel's locale data.

The rule engine itself knows nothing about locales; it works on description
strings. This module supplies those strings for any locale Babel knows:

    >>> description_for_locale("en").startswith("one: ")
    True
    >>> rules_for_locale("pl").select(5)
    'many'

Babel drops sample clauses and the "other" rule when it loads CLDR data,
so the descriptions returned here carry neither. Rule-sets built from them
compute their samples from the conditions.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import functools
import logging

from babel.core import UnknownLocaleError

from pluralengine.constants import MAX_LOCALE_CACHE_SIZE, STANDARD_KEYWORDS
from pluralengine.enums import PluralType
from pluralengine.locale_utils import get_babel_locale, normalize_locale
from pluralengine.runtime.rules import PluralRules
from pluralengine.runtime.sampling_config import SamplingConfig

__all__ = ["description_for_locale", "rules_for_locale"]

logger = logging.getLogger(__name__)


def description_for_locale(locale_code: str, plural_type: PluralType = PluralType.CARDINAL) -> str:
    """Return the CLDR plural rules description for a locale.

    Args:
        locale_code: Locale code (e.g., "en_US", "ru-RU", "ar")
        plural_type: CARDINAL for counts ("1 day"), ORDINAL for ranks ("1st")

    Returns:
        Description with one clause per keyword in CLDR order (zero, one,
        two, few, many). Empty for unknown or invalid locales, which
        therefore get the rule-set with only "other".
    """
    return _description(normalize_locale(locale_code), PluralType(plural_type))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _description(locale_code: str, plural_type: PluralType) -> str:
    try:
        locale = get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning("Unknown locale '%s': %s. Falling back to 'other' only", locale_code, e)
        return ""
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to 'other' only", locale_code, e
        )
        return ""

    match plural_type:
        case PluralType.CARDINAL:
            plural_rule = locale.plural_form
        case PluralType.ORDINAL:
            plural_rule = locale.ordinal_form

    conditions = plural_rule.rules
    return "; ".join(
        f"{keyword}: {conditions[keyword]}" for keyword in STANDARD_KEYWORDS if keyword in conditions
    )


def rules_for_locale(
    locale_code: str,
    plural_type: PluralType = PluralType.CARDINAL,
    *,
    config: SamplingConfig | None = None,
) -> PluralRules:
    """Parse the CLDR plural rules of a locale.

    Args:
        locale_code: Locale code (e.g., "en_US", "ru-RU", "ar")
        plural_type: CARDINAL or ORDINAL rules
        config: Sampling configuration for the analysis methods

    Returns:
        PluralRules for the locale; the "other"-only rule-set for unknown
        locales
    """
    return PluralRules.parse(description_for_locale(locale_code, plural_type), config=config)
