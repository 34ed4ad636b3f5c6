"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from twotouch.codec import ModifierKind, SymbolTable, get_decoder, get_encoder, get_symbol_table


@pytest.fixture
def table():
    """The process-wide default symbol table."""
    return get_symbol_table()

@pytest.fixture
def encoder():
    """Encoder bound to the default table."""
    return get_encoder()

@pytest.fixture
def decoder():
    """Decoder bound to the default table."""
    return get_decoder()

@pytest.fixture
def variant_table():
    """Table that also accepts an alternate code for voicing and semi-voicing."""
    return SymbolTable(modifier_codes={
        ModifierKind.voiced: ("04", "89"),
        ModifierKind.semi_voiced: ("05", "80"),
    })

@pytest.fixture
def canonical_words():
    """Canonical kana words (hiragana, composed, full-size)."""
    return [
        "ごくろうさん",
        "こんにちは",
        "やきにく",
        "がつこう",
        "らーめん",
        "ぱぴぷぺぽ",
        "ゔあいおりん",
        "わをん",
        "すごーーい",
        "",
    ]
