from acceptlang.acceptparse import normalize
from acceptlang.languages import (
    COMMON_LANGUAGES,
    get_common_languages,
    to_options,
)


class TestGetCommonLanguages(object):
    def test_mapping(self):
        languages = get_common_languages()
        assert languages == COMMON_LANGUAGES
        assert len(languages) == 41
        assert languages['en-US'] == 'English (US)'
        assert languages['zh-TW'] == 'Chinese (Traditional)'

    def test_mapping_is_a_copy(self):
        languages = get_common_languages()
        languages['xx'] = 'Unknown'
        assert 'xx' not in COMMON_LANGUAGES

    def test_as_options(self):
        options = get_common_languages(as_options=True)
        assert len(options) == len(COMMON_LANGUAGES)
        assert options[0] == {'value': 'en', 'label': 'English'}
        assert options[-1] == {'value': 'uk', 'label': 'Ukrainian'}

    def test_tags_are_normalized(self):
        for tag in COMMON_LANGUAGES:
            assert normalize(tag) == tag


class TestToOptions(object):
    def test_keeps_order(self):
        items = {'b': 'Bee', 'a': 'Ay'}
        assert to_options(items) == [
            {'value': 'b', 'label': 'Bee'},
            {'value': 'a', 'label': 'Ay'},
        ]

    def test_empty(self):
        assert to_options({}) == []
