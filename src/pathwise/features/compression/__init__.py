from .gzip_codec import gunzip_file, gzip_file

__all__ = ["gunzip_file", "gzip_file"]
