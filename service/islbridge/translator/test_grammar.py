"""
Test suite for the ISL gloss converter.

Tests:
1. Demo sentences
2. Degenerate input
3. Individual stages
4. Output properties
5. Custom lexicon
"""

import pytest

from islbridge.translator.grammar import (
    GlossConverter,
    convert_to_gloss,
    expand_numbers,
    lemmatize,
    move_question_word,
    move_verb_to_end,
    remove_stopwords,
    tokenize,
)
from islbridge.translator.lexicon import ARTICLES, DEFAULT_LEXICON, HELPING_VERBS, Lexicon


# ========== DEMO SENTENCES ==========

@pytest.mark.parametrize('text, expected', [
    ('The cat is here', 'CAT HERE'),
    ('What is your name', 'YOUR NAME WHAT'),
    ('I like computer', 'I COMPUTER LIKE'),
    ('I ate 5 apples', 'I FIVE APPLES EAT'),
    ('Where are you going?', 'YOU GOING? WHERE'),
    ('Where are you going', 'YOU WHERE GO'),
    ('Hello!', 'HELLO'),
    ('I want water.', 'I WATER WANT'),
])
def test_demo_sentences(text, expected):
    assert convert_to_gloss(text) == expected


def test_converter_is_callable():
    converter = GlossConverter()
    assert converter('I like computer') == converter.convert('I like computer')


# ========== DEGENERATE INPUT ==========

@pytest.mark.parametrize('text', [
    '',
    '   ',
    'a an the',
    'The is',
    '...!!!',
    '(-_-)',
    None,
    42,
    ['I', 'like'],
])
def test_degenerate_input_gives_empty_gloss(text):
    assert convert_to_gloss(text) == ''


def test_never_raises_on_odd_text():
    assert convert_to_gloss('\t\n') == ''
    assert convert_to_gloss('ÉCOLE') == 'ÉCOLE'


# ========== STAGES ==========

def test_tokenize_strips_punctuation_and_lowercases():
    assert tokenize('Hello, World! (Test)') == ['hello', 'world', 'test']


def test_tokenize_keeps_apostrophes_and_question_marks():
    assert tokenize("Don't stop?") == ["don't", 'stop?']


def test_tokenize_joins_words_split_by_punctuation():
    # Punctuation is deleted, not replaced with a space
    assert tokenize('well-known e.g.') == ['wellknown', 'eg']


def test_expand_numbers_only_zero_to_ten():
    tokens = ['0', '5', '10', '11', '05', '-1', '3.5']
    assert expand_numbers(tokens, DEFAULT_LEXICON) == ['zero', 'five', 'ten', '11', '05', '-1', '3.5']


def test_remove_stopwords():
    tokens = ['the', 'cat', 'is', 'a', 'pet', 'were', 'am']
    assert remove_stopwords(tokens, DEFAULT_LEXICON) == ['cat', 'pet']


def test_lemmatize():
    tokens = ['going', 'came', 'helped', 'like', 'apples']
    assert lemmatize(tokens, DEFAULT_LEXICON) == ['go', 'come', 'help', 'like', 'apples']


def test_question_word_moves_once_from_front_only():
    assert move_question_word(['what', 'your', 'name'], DEFAULT_LEXICON) == ['your', 'name', 'what']
    assert move_question_word(['your', 'name', 'what'], DEFAULT_LEXICON) == ['your', 'name', 'what']
    assert move_question_word(['who', 'what'], DEFAULT_LEXICON) == ['what', 'who']


def test_single_question_word_stays():
    assert move_question_word(['why'], DEFAULT_LEXICON) == ['why']


def test_only_first_verb_moves():
    tokens = ['i', 'go', 'eat', 'food']
    assert move_verb_to_end(tokens, DEFAULT_LEXICON) == ['i', 'eat', 'food', 'go']


def test_verb_already_last_stays():
    assert move_verb_to_end(['i', 'food', 'eat'], DEFAULT_LEXICON) == ['i', 'food', 'eat']


def test_lemma_key_counts_as_verb():
    # 'helping' is only in the lemma table, not in the verb list
    assert move_verb_to_end(['helping', 'you'], DEFAULT_LEXICON) == ['you', 'helping']


def test_lemmatized_root_outside_verb_list_does_not_move():
    # 'helped' -> 'help', and 'help' itself is neither a verb form nor a lemma key
    assert convert_to_gloss('I helped you') == 'I HELP YOU'


def test_stages_do_not_mutate_input():
    tokens = ['what', 'i', 'eat', 'food']
    move_question_word(tokens, DEFAULT_LEXICON)
    move_verb_to_end(tokens, DEFAULT_LEXICON)
    assert tokens == ['what', 'i', 'eat', 'food']


def test_trace_records_every_stage():
    stages = GlossConverter().trace('I ate 5 apples')
    assert stages == {
        'tokens': ['i', 'ate', '5', 'apples'],
        'numbers': ['i', 'ate', 'five', 'apples'],
        'stopwords': ['i', 'ate', 'five', 'apples'],
        'lemmas': ['i', 'eat', 'five', 'apples'],
        'question': ['i', 'eat', 'five', 'apples'],
        'verb_final': ['i', 'five', 'apples', 'eat'],
    }


def test_trace_stops_after_stopwords_empty_the_sentence():
    stages = GlossConverter().trace('The a is')
    assert list(stages) == ['tokens', 'numbers', 'stopwords']
    assert stages['stopwords'] == []


def test_trace_of_empty_input():
    assert GlossConverter().trace('') == {}
    assert GlossConverter().trace(None) == {}


# ========== PROPERTIES ==========

SAMPLE_TEXTS = [
    'The boy is eating an apple',
    'Were you at the school?',
    'What did you see at the park',
    'I am going to play 10 games',
    'They were the best of the best',
    'A dog, a cat, and the 3 mice!',
]


@pytest.mark.parametrize('text', SAMPLE_TEXTS)
def test_output_has_no_stopwords(text):
    gloss = convert_to_gloss(text)
    tokens = gloss.lower().split()
    assert not set(tokens) & (ARTICLES | HELPING_VERBS)


@pytest.mark.parametrize('text', SAMPLE_TEXTS)
def test_output_never_grows(text):
    assert len(convert_to_gloss(text).split()) <= len(tokenize(text))


@pytest.mark.parametrize('text', SAMPLE_TEXTS)
def test_output_is_uppercase_single_spaced(text):
    gloss = convert_to_gloss(text)
    assert gloss == gloss.upper()
    assert '  ' not in gloss
    assert gloss == gloss.strip()


def test_reconverting_gloss_is_not_a_fixed_point():
    # Glosses are not meant to round-trip
    first = convert_to_gloss('I go eat')
    assert first == 'I EAT GO'
    assert convert_to_gloss(first) == 'I GO EAT'


# ========== CUSTOM LEXICON ==========

def test_custom_lexicon():
    lexicon = Lexicon.build(common_verbs=['Drink'], wh_words=['how'])
    converter = GlossConverter(lexicon)
    assert converter.convert('How you drink tea') == 'YOU TEA HOW DRINK'
    # Default tables untouched
    assert convert_to_gloss('How you drink tea') == 'HOW YOU DRINK TEA'


def test_lexicon_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_LEXICON.lemma_map['went'] = 'go'
    with pytest.raises(AttributeError):
        DEFAULT_LEXICON.articles.add('some')
