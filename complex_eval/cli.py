import argparse
import json
import sys

from complex_eval.analysis import Analysis
from complex_eval.errors import ComplexEvalError, InvalidOptionError
from complex_eval.evaluator.index_result import format_index
from complex_eval.options import Options, check_threshold
from complex_eval.util.data_processing import load_json, save_json, save_table


def single_split(string, sep=","):
    return string.strip().split(sep)


def threshold_list(string):
    return [float(t) for t in single_split(string)]


def build_parser():
    parser = argparse.ArgumentParser(
        description='Evaluate predicted protein complexes against reference complexes'
    )
    parser.add_argument("-p", "--ppi_file", dest="ppi_path", default=None,
                        help="PPI file, one interaction per line: protein_1 protein_2 [weight]")
    parser.add_argument("-r", "--reference_file", dest="ref_complex_path", default=None,
                        help="Reference complexes, one complex per line")
    parser.add_argument("-c", "--predicted_file", dest="pre_complex_path", default=None,
                        help="Predicted complexes, one complex per line")
    parser.add_argument("-m", "--min_size", dest="min_size", default=None, type=int,
                        help="Complexes with less proteins are discarded. Default: 3")
    parser.add_argument("-t", "--threshold", dest="thresholds", default=None, type=threshold_list,
                        help="OS cutoff for a match, in (0, 1]. Several comma separated values give a sweep table. Default: 0.25")
    parser.add_argument("-f", "--filter_mode", dest="filter_mode", default=None,
                        choices=["none", "keep", "intersect"],
                        help="How PPI proteins restrict complexes: none (default), keep, intersect")
    parser.add_argument("-T", "--threads", dest="n_jobs", default=None, type=int,
                        help="Number of jobs used to build the OS matrix. Default: 1")
    parser.add_argument("-o", "--output_file", dest="output_file", default=None,
                        help="Write options and indexes to this JSON file")
    parser.add_argument("--match_table", dest="match_table_file", default=None,
                        help="Write the best reference match of each predicted complex to this TSV file")
    parser.add_argument("--config", dest="config_file", default=None,
                        help="JSON file with options, command line flags override it")
    parser.add_argument("-q", "--quiet", dest="display_flag", default=True, action="store_false",
                        help="Only print the results")
    return parser


def get_options(opts):
    param = {}
    if opts.config_file is not None:
        config = load_json(opts.config_file)
        if not isinstance(config, dict):
            raise InvalidOptionError(f'{opts.config_file} must hold a JSON object')
        param.update(config)

    for key in ('ppi_path', 'ref_complex_path', 'pre_complex_path', 'min_size',
                'filter_mode', 'n_jobs', 'output_file', 'match_table_file'):
        value = getattr(opts, key)
        if value is not None:
            param[key] = value

    thresholds = opts.thresholds
    if thresholds:
        param['threshold'] = thresholds[0]
    options = Options.from_dict(param)
    if not thresholds:
        thresholds = [options.threshold]
    for threshold in thresholds:
        check_threshold(threshold)
    return options, thresholds


def run(options, thresholds, display_flag=True):
    if display_flag:
        print(json.dumps(options.to_dict(), indent=4))
        print('==== Load protein complexes ====')

    analysis = Analysis.from_options(options, display_flag=display_flag)

    results = []
    for threshold in thresholds:
        result = analysis.calculate_index(threshold)
        p_num, r_num = analysis.match_counts(threshold)
        num_msg = f' precision={p_num}/{len(analysis.pre_complex)}, recall={r_num}/{len(analysis.ref_complex)}'
        print(f'threshold={format_index(threshold, 2)} {result.message()}{num_msg}')
        results.append({'threshold': threshold, **result.to_dict(),
                        'matched_predicted': p_num, 'matched_reference': r_num})

    if len(thresholds) > 1:
        print(analysis.sweep_thresholds(thresholds).to_string(index=False))

    if options.output_file is not None:
        save_json(options.output_file, {
            'options': options.to_dict(),
            'ppi_proteins': len(analysis.proteins),
            'results': results,
        })
        if display_flag:
            print(f'Saved {options.output_file}')

    if options.match_table_file is not None:
        save_table(options.match_table_file, analysis.match_table(options.threshold))
        if display_flag:
            print(f'Saved {options.match_table_file}')

    return results


def main(args=None):
    parser = build_parser()
    opts = parser.parse_args(args)
    try:
        options, thresholds = get_options(opts)
        run(options, thresholds, display_flag=opts.display_flag)
    except ComplexEvalError as e:
        print(f'ERROR: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
