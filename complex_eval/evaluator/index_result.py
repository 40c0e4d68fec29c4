from dataclasses import asdict, dataclass
from typing import Optional

import pandas as pd

INDEX_NAMES = ('precision', 'recall', 'f_measure', 'sn', 'ppv', 'acc')


@dataclass(frozen=True)
class IndexResult:
    """
    Quality indexes of a predicted complex set against a reference set.

    f_measure is None when precision + recall == 0, ppv and acc are None when
    no predicted complex shares a protein with any reference complex.
    """

    precision: float
    recall: float
    f_measure: Optional[float]
    sn: float                   # sensitivity
    ppv: Optional[float]        # positive predictive value
    acc: Optional[float]        # accuracy, sqrt(sn * ppv)

    def to_dict(self):
        return asdict(self)

    def to_frame(self, threshold=None):
        data_pd = pd.DataFrame([self.to_dict()], columns=list(INDEX_NAMES))
        if threshold is not None:
            data_pd.insert(0, 'threshold', threshold)
        return data_pd

    def message(self):
        return '[' + ', '.join(f'{name}={format_index(getattr(self, name))}' for name in INDEX_NAMES) + ']'


def format_index(value, digits=4):
    if value is None:
        return 'undefined'
    return f'{value:.{digits}f}'
