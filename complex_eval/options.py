import numbers
from dataclasses import asdict, dataclass, fields
from typing import Optional

from complex_eval.errors import InvalidOptionError

FILTER_MODES = ('none', 'keep', 'intersect')


def check_threshold(threshold):
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise InvalidOptionError(f'threshold must be a number, got {threshold!r}')
    if not 0 < threshold <= 1:
        raise InvalidOptionError(f'threshold must be in (0, 1], got {threshold}')


@dataclass
class Options:
    """Input files and parameters of one evaluation."""

    ppi_path: str
    ref_complex_path: str
    pre_complex_path: str
    min_size: int = 3
    threshold: float = 0.25
    # how the PPI proteins restrict complex members: none, keep or intersect
    filter_mode: str = 'none'
    n_jobs: int = 1
    output_file: Optional[str] = None
    match_table_file: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.min_size, bool) or not isinstance(self.min_size, int) or self.min_size < 1:
            raise InvalidOptionError(f'min_size must be a positive integer, got {self.min_size!r}')
        check_threshold(self.threshold)
        if self.filter_mode not in FILTER_MODES:
            raise InvalidOptionError(
                f'filter_mode must be one of {", ".join(FILTER_MODES)}, got {self.filter_mode!r}'
            )
        if isinstance(self.n_jobs, bool) or not isinstance(self.n_jobs, int) or self.n_jobs == 0:
            raise InvalidOptionError(f'n_jobs must be a non-zero integer, got {self.n_jobs!r}')

    @classmethod
    def from_dict(cls, param):
        if not isinstance(param, dict):
            raise InvalidOptionError(f'options must be a mapping, got {type(param).__name__}')
        known = {f.name for f in fields(cls)}
        unknown = set(param) - known
        if unknown:
            raise InvalidOptionError(f'unknown option(s): {", ".join(sorted(unknown))}')
        missing = {'ppi_path', 'ref_complex_path', 'pre_complex_path'} - set(param)
        if missing:
            raise InvalidOptionError(f'missing option(s): {", ".join(sorted(missing))}')
        return cls(**param)

    def to_dict(self):
        return asdict(self)
