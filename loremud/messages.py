import os
import yaml

LOCALES_PATH = os.path.join(os.path.dirname(__file__), "locales")
DEFAULT_LANGUAGE = "en"


class UnknownLanguageError(Exception):
    pass


class Messages:
    def __init__(self, catalog, language=DEFAULT_LANGUAGE):
        """
        Message catalog: internal key -> display string.
        Strings may carry str.format placeholders ({item}, {direction}, {items}).
        """
        self.catalog = catalog
        self.language = language

    def get(self, key, **params):
        template = self.catalog.get(key)
        if template is None:
            # Keep the key visible rather than hiding a missing translation
            return key
        if params:
            return template.format(**params)
        return template


def available_languages():
    return sorted(
        os.path.splitext(name)[0]
        for name in os.listdir(LOCALES_PATH)
        if name.endswith(".yaml")
    )


def _read_catalog(language):
    path = os.path.join(LOCALES_PATH, f"{language}.yaml")
    if not os.path.exists(path):
        raise UnknownLanguageError(language)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_messages(language=DEFAULT_LANGUAGE):
    """Keys missing from a translation fall back to the English wording."""
    catalog = dict(_read_catalog(DEFAULT_LANGUAGE))
    if language != DEFAULT_LANGUAGE:
        catalog.update(_read_catalog(language))
    return Messages(catalog, language)
