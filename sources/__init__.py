# Importing the modules registers the built-in export sources
from . import file_export  # noqa: F401
from . import url_export  # noqa: F401
