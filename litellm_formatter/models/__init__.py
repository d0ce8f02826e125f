from .items import BatchItem
from .options import FormatterOptions

__all__ = ["BatchItem", "FormatterOptions"]
