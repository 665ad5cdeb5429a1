from microurl.visitors.aggregators import UrlFrequencyVisitor, PrefixCountVisitor, ClickTotalVisitor
from microurl.visitors.adapters import unpack_to


__all__ = [
    'UrlFrequencyVisitor',
    'PrefixCountVisitor',
    'ClickTotalVisitor',
    'unpack_to',
]
