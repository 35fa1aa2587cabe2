"""Line classifiers for the Pepino matcher.

Each classifier is a mixin that provides the match rules for one family
of lines. Rules return a Token when the line matches and None otherwise;
only the doc-string and language rules touch matcher state.
"""

from pepino.matcher.classifiers.docstring import (
    DocStringClassifierMixin,
)
from pepino.matcher.classifiers.language import (
    LanguageClassifierMixin,
)
from pepino.matcher.classifiers.structural import (
    StructuralClassifierMixin,
)
from pepino.matcher.classifiers.table import (
    TableClassifierMixin,
)
from pepino.matcher.classifiers.tags import (
    TagClassifierMixin,
)
from pepino.matcher.classifiers.title import (
    TitleClassifierMixin,
)

__all__ = [
    "DocStringClassifierMixin",
    "LanguageClassifierMixin",
    "StructuralClassifierMixin",
    "TableClassifierMixin",
    "TagClassifierMixin",
    "TitleClassifierMixin",
]
