import numpy as np
from joblib import Parallel, delayed

from complex_eval.errors import DegenerateInputError
from complex_eval.evaluator.index_result import IndexResult
from complex_eval.options import check_threshold


def os_overlap_row(pred, reference_complex):
    scores = []
    overlaps = []
    for ref in reference_complex:
        score, overlap = pred.os(ref)
        scores.append(score)
        overlaps.append(overlap)
    return scores, overlaps


def calculate_all_os_overlap(predicted_complex, reference_complex, n_jobs=1):
    """
    OS score and number of shared proteins of every (predicted, reference) pair

    both matrices are |predicted| x |reference|, cell [i, j] holds
    predicted_complex[i].os(reference_complex[j]) and nothing else

    :param n_jobs: rows are computed by joblib workers when n_jobs != 1
    :return os_matrix (float64), overlap_matrix (int64), both read-only
    """
    shape = (len(predicted_complex), len(reference_complex))
    os_matrix = np.zeros(shape, dtype=np.float64)
    overlap_matrix = np.zeros(shape, dtype=np.int64)

    if n_jobs == 1 or shape[0] <= 1:
        rows = [os_overlap_row(pred, reference_complex) for pred in predicted_complex]
    else:
        rows = Parallel(n_jobs=n_jobs)(
            delayed(os_overlap_row)(pred, reference_complex) for pred in predicted_complex
        )

    # Parallel keeps the input order, row i is predicted_complex[i]
    for i, (scores, overlaps) in enumerate(rows):
        os_matrix[i, :] = scores
        overlap_matrix[i, :] = overlaps

    os_matrix.flags.writeable = False
    overlap_matrix.flags.writeable = False
    return os_matrix, overlap_matrix


def check_complex_num(complex_num, name):
    if complex_num == 0:
        raise DegenerateInputError(f'no {name} complex left to evaluate, metrics are undefined')


def precision_score(predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold):
    """
    fraction of predicted complexes matching at least one reference complex
    with OS > threshold

    :return precision, number of matched predicted complexes,
        best match of each matched predicted complex, unmatched predicted complexes
    """
    predicted_num = len(predicted_complex)
    check_complex_num(predicted_num, 'predicted')

    match_info_list = []
    unmatch_pred_list = []
    number = 0
    for i, pred in enumerate(predicted_complex):
        if len(reference_complex) == 0:
            unmatch_pred_list.append(pred)
            continue
        j = int(np.argmax(os_matrix[i]))
        overlapscore = float(os_matrix[i, j])
        if overlapscore > threshold:
            number = number + 1
            match_info_list.append({
                'pred': pred, 'true': reference_complex[j],
                'overlap_score': overlapscore,
                'overlap': int(overlap_matrix[i, j]),
                'pred_id': i, 'true_id': j,
            })
        else:
            unmatch_pred_list.append(pred)

    return number / predicted_num, number, match_info_list, unmatch_pred_list


def recall_score(predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold):
    """
    fraction of reference complexes matched by at least one predicted complex
    with OS > threshold

    :return recall, number of matched reference complexes,
        best match of each matched reference complex, unmatched reference complexes
    """
    reference_num = len(reference_complex)
    check_complex_num(reference_num, 'reference')

    match_info_list = []
    unmatch_ref_list = []
    c_number = 0
    for j, ref in enumerate(reference_complex):
        if len(predicted_complex) == 0:
            unmatch_ref_list.append(ref)
            continue
        i = int(np.argmax(os_matrix[:, j]))
        overlapscore = float(os_matrix[i, j])
        if overlapscore > threshold:
            c_number = c_number + 1
            match_info_list.append({
                'pred': predicted_complex[i], 'true': ref,
                'overlap_score': overlapscore,
                'overlap': int(overlap_matrix[i, j]),
                'pred_id': i, 'true_id': j,
            })
        else:
            unmatch_ref_list.append(ref)

    return c_number / reference_num, c_number, match_info_list, unmatch_ref_list


def f_measure_score(precision, recall):
    # undefined when nothing matched on either side
    if precision + recall == 0:
        return None
    return float((2 * precision * recall) / (precision + recall))


def sn_score(reference_complex, overlap_matrix):
    """
    Sn = sum over reference complexes of their best overlap with a predicted
    complex, divided by the total size of the reference complexes
    """
    check_complex_num(len(reference_complex), 'reference')
    check_complex_num(overlap_matrix.shape[0], 'predicted')

    N_sum = sum(ref.size() for ref in reference_complex)
    if N_sum == 0:
        raise DegenerateInputError('reference complexes are all empty, Sn is undefined')

    T_sum1 = int(overlap_matrix.max(axis=0).sum())
    return float(T_sum1) / float(N_sum)


def ppv_score(overlap_matrix):
    """
    PPV = sum over predicted complexes of their best overlap with a reference
    complex, divided by the sum of all overlaps

    :return None when no pair shares a protein
    """
    check_complex_num(overlap_matrix.shape[0], 'predicted')
    check_complex_num(overlap_matrix.shape[1], 'reference')

    T_sum = int(overlap_matrix.sum())
    if T_sum == 0:
        return None

    T_sum2 = int(overlap_matrix.max(axis=1).sum())
    return float(T_sum2) / float(T_sum)


def acc_score(reference_complex, overlap_matrix):
    """
    :return Sn, PPV and Acc = sqrt(Sn * PPV)
    """
    Sn = sn_score(reference_complex, overlap_matrix)
    PPV = ppv_score(overlap_matrix)
    if PPV is None:
        return Sn, None, None
    Acc = pow(float(Sn * PPV), 0.5)
    return Sn, PPV, Acc


def get_index_result(predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold):
    check_threshold(threshold)
    check_complex_num(len(predicted_complex), 'predicted')
    check_complex_num(len(reference_complex), 'reference')

    precision, _, _, _ = precision_score(
        predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold
    )
    recall, _, _, _ = recall_score(
        predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold
    )
    f_measure = f_measure_score(precision, recall)
    sn, ppv, acc = acc_score(reference_complex, overlap_matrix)

    return IndexResult(
        precision=precision,
        recall=recall,
        f_measure=f_measure,
        sn=sn,
        ppv=ppv,
        acc=acc,
    )


def get_score(reference_complex, predicted_complex, threshold=0.25, n_jobs=1):
    os_matrix, overlap_matrix = calculate_all_os_overlap(
        predicted_complex, reference_complex, n_jobs=n_jobs
    )
    result = get_index_result(
        predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold
    )

    reference_num = len(reference_complex)
    predicted_num = len(predicted_complex)

    _, p_num, _, _ = precision_score(
        predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold
    )
    _, r_num, _, _ = recall_score(
        predicted_complex, reference_complex, os_matrix, overlap_matrix, threshold
    )

    msg = result.message()

    num_msg = f' precision={p_num}/{predicted_num}, recall={r_num}/{reference_num} '

    return msg+num_msg
