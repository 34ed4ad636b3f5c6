"""Pager shorthand (語呂合わせ) codes for whole phrases.

Before two-touch input caught on, pager users sent numbers whose digit
readings spell out a phrase, e.g. ``0840`` (お・は・よ・う) for おはよう.
These codes are not two-touch encodings: decoding them with the two-touch
decoder does not give the phrase back, so they are kept apart from the codec.
"""

from typing import Dict, List, Tuple

import jaconv

# Phrase -> codes, most common code first.
PAGER_ABBREVIATIONS: Dict[str, Tuple[str, ...]] = {
    "今": ("10",),
    "いま": ("10",),
    "海": ("41",),
    "うみ": ("41",),
    "しー": ("41",),
    "至急": ("49",),
    "しきゅう": ("49",),
    "待ってる": ("106",),
    "まってる": ("106",),
    "tel": ("106",),
    "てる": ("106",),
    "遅れてる": ("9106",),
    "おくれてる": ("9106",),
    "愛してる": ("14106", "114106", "1410"),
    "あいしてる": ("14106", "114106", "1410"),
    "何してる": ("724106",),
    "なにしてる": ("724106",),
    "起きてる": ("09106", "9106"),
    "おきてる": ("09106", "9106"),
    "行くよ": ("194",),
    "いくよ": ("194",),
    "池袋": ("269",),
    "いけぶくろ": ("269",),
    "渋谷": ("428",),
    "しぶや": ("428",),
    "おやすみ": ("833",),
    "おはよう": ("840", "0840"),
    "はろー": ("860",),
    "早く": ("889",),
    "はやく": ("889",),
    "さんきゅー": ("39", "999"),
    "thank you": ("39", "999"),
    "会えない": ("1871",),
    "あえない": ("1871",),
    "さよなら": ("3470",),
    "寒いよ": ("3614",),
    "さむいよ": ("3614",),
    "仕事": ("4510",),
    "しごと": ("4510",),
    "横浜": ("4580",),
    "よこはま": ("4580",),
    "よろしく": ("4649",),
    "ふぁいと": ("5110",),
    "お仕事ふぁいと": ("045105110",),
    "おしごとふぁいと": ("045105110",),
    "ご苦労さん": ("5963",),
    "ごくろうさん": ("5963",),
    "ばいと": ("8110",),
    "ばいばい": ("8181",),
    "今どこ": ("10105",),
    "いまどこ": ("10105",),
    "会いたいよ": ("110149",),
    "あいたいよ": ("11014",),
    "着いたよ": ("21104",),
    "ついたよ": ("21104",),
    "寂しいよ": ("33414",),
    "さびしいよ": ("33414",),
    "でーとしよ": ("101044",),
    "tel欲しい": ("106841",),
    "telほしい": ("106841",),
    "ごめんなさい": ("500731",),
    "早くして": ("889410",),
    "はやくして": ("889410",),
    "どこにいるの": ("1052167",),
    "今から行くよ": ("1056194",),
    "いまからいくよ": ("1056194",),
    "ぼうりんぐ行こ": ("015",),
    "ぼうりんぐいこ": ("015",),
    "遅れる": ("090",),
    "おくれる": ("090",),
    "ずっと一緒にいようね": ("2101442147",),
    "ずっといっしょにいようね": ("2101442147",),
    "ずっと一緒にいよーね": ("21014421479",),
    "ずっといっしょにいよーね": ("21014421479",),
}


def normalize_phrase(text: str) -> str:
    """Fold width, katakana and letter case so lookups ignore them.

    Args:
        text: The phrase to normalize

    Returns:
        Normalized phrase used as the lookup key
    """
    text = jaconv.z2h(text, kana=False, ascii=True, digit=True)
    text = jaconv.kata2hira(text)
    return text.strip().lower()


_INDEX: Dict[str, Tuple[str, ...]] = {
    normalize_phrase(phrase): codes for phrase, codes in PAGER_ABBREVIATIONS.items()
}


def lookup_abbreviations(text: str) -> List[str]:
    """Return the pager shorthand codes for *text*, or an empty list."""
    return list(_INDEX.get(normalize_phrase(text), ()))
