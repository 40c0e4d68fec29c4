from complex_eval.model.complex import Complex, overlap_score
from complex_eval.evaluator.index_result import IndexResult
from complex_eval.evaluator.compare_performance import calculate_all_os_overlap, get_index_result
from complex_eval.analysis import Analysis
from complex_eval.options import Options
from complex_eval.errors import ComplexEvalError, MissingInputError, MalformedLineError, \
    DegenerateInputError, InvalidOptionError

__version__ = '0.1.0'
