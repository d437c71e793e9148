from .office_converter import OfficeConverter

__all__ = ["OfficeConverter"]
