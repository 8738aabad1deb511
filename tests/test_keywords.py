## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

import pytest

from profargs.keywords import Keyword, keyword_hash, match_keyword, vocabulary, MAX_KEYWORD_LENGTH


def test_hash_packs_five_bits_per_character():
    assert keyword_hash("") == 0
    assert keyword_hash("a") == 1
    assert keyword_hash("ab") == 1 | (2 << 5)
    assert keyword_hash("start") == keyword_hash("start" + " " * 7)


def test_vocabulary_hashes_fit_in_sixty_bits_and_are_distinct():
    hashes = [keyword_hash(spelling) for spelling in vocabulary()]
    assert len(set(hashes)) == len(hashes)
    assert all(0 < h < 2**60 for h in hashes)


@pytest.mark.parametrize("spelling", sorted(vocabulary()))
def test_every_spelling_dispatches_to_its_keyword(spelling):
    kw = match_keyword(spelling)
    assert kw is not None
    assert spelling in kw.spellings


def test_aliases_share_a_keyword():
    assert match_keyword("folded") is Keyword.COLLAPSED
    assert match_keyword("collapsed") is Keyword.COLLAPSED
    assert match_keyword("html") is Keyword.FLAMEGRAPH
    assert match_keyword("flamegraph") is Keyword.FLAMEGRAPH


def test_matching_is_case_sensitive_despite_equal_hashes():
    assert keyword_hash("START") == keyword_hash("start")
    assert match_keyword("START") is None
    assert match_keyword("start ") is None


def test_unknown_and_overlong_keys_are_not_matched():
    assert match_keyword("") is None
    assert match_keyword("bogus") is None
    assert match_keyword("x" * (MAX_KEYWORD_LENGTH + 1)) is None
    assert match_keyword("jstackdepthxx") is None
