"""
Built-in text extractors. Importing this package registers all of them
with core.registry, in the order their extensions are reported.
"""

from . import pdf_processor  # noqa: F401
from . import docx_processor  # noqa: F401
from . import xlsx_processor  # noqa: F401
from . import txt_processor  # noqa: F401
