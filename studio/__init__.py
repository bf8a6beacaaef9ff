"""Writing Studio API: AI Tweet Creator and Reading Tutor."""

__version__ = "0.1.0"
