from utils.messages import base_language, get_message


def test_base_language_parsing():
     assert base_language(None) == "en"
     assert base_language("ar-SA,ar;q=0.9,en;q=0.8") == "ar"
     assert base_language("EN-us") == "en"


def test_unknown_language_falls_back_to_default():
     assert get_message("building_not_found", "fr") == "Building not found"


def test_unknown_key_falls_back_to_key():
     assert get_message("no_such_key", "ar") == "no_such_key"


def test_catalogs_share_keys():
     from utils.messages import load_messages

     assert set(load_messages("en")) == set(load_messages("ar"))


def test_unknown_languages_do_not_grow_the_catalog_cache():
     from utils.messages import AVAILABLE_LANGUAGES, load_messages

     for n in range(500):
          get_message("not_found", f"x{n}-XX")
     assert base_language("zz") == "en"
     assert load_messages.cache_info().currsize <= len(AVAILABLE_LANGUAGES)
