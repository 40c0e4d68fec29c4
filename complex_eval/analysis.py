import pandas as pd

from complex_eval.evaluator.compare_performance import calculate_all_os_overlap, \
    get_index_result, precision_score, recall_score
from complex_eval.util.data_processing import load_complex, load_ppi_proteins, \
    filter_modules, match_info_to_frame


class Analysis:
    """
    reference and predicted complexes together with their OS and overlap
    matrices; the matrices are computed once and shared by every threshold
    """

    def __init__(self, pre_complex, ref_complex, n_jobs=1, proteins=None):
        self.pre_complex = list(pre_complex)
        self.ref_complex = list(ref_complex)
        self.proteins = set() if proteins is None else set(proteins)
        self.os_matrix, self.overlap_matrix = calculate_all_os_overlap(
            self.pre_complex, self.ref_complex, n_jobs=n_jobs
        )

    @classmethod
    def from_options(cls, options, display_flag=False):
        proteins = load_ppi_proteins(options.ppi_path, display_flag=display_flag)

        ref_complex = load_complex(options.ref_complex_path, options.min_size, display_flag=display_flag)
        pre_complex = load_complex(options.pre_complex_path, options.min_size, display_flag=display_flag)

        if options.filter_mode != 'none':
            only_intersect_flag = options.filter_mode == 'intersect'
            # find complexes belong to the current ppi
            ref_complex = filter_modules(
                ref_complex, proteins, min_protein_num=options.min_size,
                only_intersect_flag=only_intersect_flag
            )
            pre_complex = filter_modules(
                pre_complex, proteins, min_protein_num=options.min_size,
                only_intersect_flag=only_intersect_flag
            )

        if display_flag:
            print(f'reference complexes = {len(ref_complex)}')
            print(f'predicted complexes = {len(pre_complex)}')

        return cls(pre_complex, ref_complex, n_jobs=options.n_jobs, proteins=proteins)

    def calculate_index(self, threshold):
        return get_index_result(
            self.pre_complex, self.ref_complex,
            self.os_matrix, self.overlap_matrix, threshold
        )

    def sweep_thresholds(self, thresholds):
        return pd.concat(
            [self.calculate_index(t).to_frame(threshold=t) for t in thresholds],
            ignore_index=True,
        )

    def match_counts(self, threshold):
        _, p_num, _, _ = precision_score(
            self.pre_complex, self.ref_complex, self.os_matrix, self.overlap_matrix, threshold
        )
        _, r_num, _, _ = recall_score(
            self.pre_complex, self.ref_complex, self.os_matrix, self.overlap_matrix, threshold
        )
        return p_num, r_num

    def match_table(self, threshold):
        """best reference match of every predicted complex above threshold"""
        _, _, match_info_list, _ = precision_score(
            self.pre_complex, self.ref_complex, self.os_matrix, self.overlap_matrix, threshold
        )
        return match_info_to_frame(match_info_list)
