"""
newmm (new maximal matching) engine, with the same call shape as
``pythainlp.tokenize.newmm``.
"""

from typing import List, Optional

from .tokenize import word_tokenize


def segment(
    text: Optional[str],
    custom_dict=None,
    keep_whitespace: bool = True,
) -> List[str]:
    """
    Segment Thai text using the newmm algorithm.

    Examples:
        >>> from thai_segmenter import newmm
        >>> newmm.segment("ฉันไปโรงเรียน")
        ['ฉัน', 'ไป', 'โรงเรียน']
        >>> newmm.segment(None)
        []
    """
    return word_tokenize(text, engine="newmm", custom_dict=custom_dict, keep_whitespace=keep_whitespace)
