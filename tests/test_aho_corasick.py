import pytest

from algokit.aho_corasick import AhoCorasickAutomaton, Matcher, Trie


def _occurrences(patterns, text):
    return {
        (start, pattern)
        for pattern in patterns
        if pattern
        for start in range(len(text) - len(pattern) + 1)
        if text.startswith(pattern, start)
    }


def test_empty_trie_has_only_root():
    assert len(Trie()) == 1


def test_trie_repeated_key_returns_same_node():
    trie = Trie()
    node = trie.add("abc")
    size = len(trie)
    assert trie.add("abc") == node
    assert len(trie) == size


def test_trie_shared_prefix_adds_one_node():
    trie = Trie()
    trie.add("ab")
    before = len(trie)
    trie.add("ac")
    assert len(trie) == before + 1


@pytest.mark.parametrize(
    "patterns, text",
    [
        (["a", "aa", "fef", "ef"], "abababaaoiwhnefiewhfef"),
        (["a", "aa", "fef", "ef"], "hfiuwhfiaaawfhiwfih"),
        (["he", "she", "his", "hers"], "ahishers"),
        (["abc", "bc", "c"], "xabcabc"),
    ],
)
def test_matches_are_exactly_the_occurrences(patterns, text):
    matches = Matcher(patterns).find_matches(text)
    assert set(matches) == _occurrences(patterns, text)
    assert len(matches) == len(set(matches))


def test_matches_ordered_by_end_then_longest_first():
    matches = Matcher(["a", "aa", "aaa"]).find_matches("aaaa")
    keys = [(start + len(pattern), -len(pattern)) for start, pattern in matches]
    assert keys == sorted(keys)


def test_step_and_reset():
    automaton = AhoCorasickAutomaton(["ab"])
    assert automaton.step("a") == []
    assert automaton.step("b") == ["ab"]
    automaton.step("a")
    automaton.reset()
    assert automaton.step("b") == []


def test_empty_pattern_is_never_reported():
    matches = Matcher(["", "a"]).find_matches("aa")
    assert all(pattern == "a" for _, pattern in matches)
    assert len(matches) == 2


def test_find_matches_starts_from_fresh_state():
    matcher = Matcher(["ab"])
    assert matcher.find_matches("a") == []
    assert matcher.find_matches("b") == []