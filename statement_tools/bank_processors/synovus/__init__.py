from .synovus_parser import SynovusStatementReader
from .synovus_processor import SynovusProcessor

__all__ = ['SynovusStatementReader', 'SynovusProcessor']
