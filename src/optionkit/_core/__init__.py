from ._depreciation import deprecated_alias
from ._main import Pipeable

__all__ = ["Pipeable", "deprecated_alias"]
