"""
xmlconf - 基于 XML 文件的键值配置存储
"""

__version__ = "1.0.0"
