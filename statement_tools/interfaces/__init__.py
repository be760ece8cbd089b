from .text_fragment import Position, TextFragment, fragments_from_triples
from .transaction import Transaction
from .statement import BalanceSummary, Statement
from .base_reader import BaseStatementReader

__all__ = [
    'Position',
    'TextFragment',
    'fragments_from_triples',
    'Transaction',
    'BalanceSummary',
    'Statement',
    'BaseStatementReader',
]
