"""Version metadata for TinyScript, read by setup.py."""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@tinyscript.org"
__license__ = "MIT"
