"""
Учебные объекты-значения для книжного склада и туристического бронирования.
"""

__version__ = "0.1.0"
