import os
import json
import networkx as nx
import pandas as pd

from complex_eval.errors import InvalidOptionError, MalformedLineError, MissingInputError
from complex_eval.model.complex import Complex


def check_input_file(file_path, kind='input'):
    if file_path is None or not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
        raise MissingInputError(file_path, kind)


def read_lines(file_path, kind='input'):
    """lines of a UTF-8 text file"""
    check_input_file(file_path, kind)
    try:
        with open(file_path, 'rb') as f:
            raw_lines = f.readlines()
    except OSError as e:
        raise MissingInputError(file_path, kind) from e

    lines = []
    for line_number, raw in enumerate(raw_lines, start=1):
        try:
            lines.append(raw.decode('utf-8'))
        except UnicodeDecodeError as e:
            raise MalformedLineError(file_path, line_number,
                                     raw.decode('utf-8', errors='replace').rstrip('\n'),
                                     'not valid UTF-8') from e
    return lines


def load_json(file_path):
    check_input_file(file_path, 'config')
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            json_ = json.loads(f.read())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidOptionError(f'{file_path} is not a valid JSON file: {e}') from e
    return json_


def save_json(file_path, data_json):
    path = os.path.dirname(file_path)
    if path and not os.path.exists(path):
        os.makedirs(path)
    with open(file_path, 'w') as f:
        json.dump(data_json, f, indent=4)


def load_ppi_network(file_path, display_flag=True):
    """
    one interaction per line: protein_1 protein_2 [weight]
    blank lines are skipped
    """
    if display_flag:
        print(f'Loading {file_path}')

    G = nx.Graph()
    for line_number, line in enumerate(read_lines(file_path, 'ppi'), start=1):
        pair = line.split()
        if len(pair) == 0:
            continue
        if len(pair) < 2:
            raise MalformedLineError(file_path, line_number, line.rstrip('\n'),
                                     'expected two protein names')
        node_1, node_2 = pair[0], pair[1]
        if len(pair) >= 3:
            try:
                weight = float(pair[2])
            except ValueError as e:
                raise MalformedLineError(file_path, line_number, line.rstrip('\n'),
                                         'edge weight is not a number') from e
            G.add_edge(node_1, node_2, weight=weight)
        else:
            G.add_edge(node_1, node_2)

    if display_flag:
        print(f'ppi proteins = {G.number_of_nodes()}, interactions = {G.number_of_edges()}')
    return G


def load_ppi_proteins(file_path, display_flag=True):
    return set(load_ppi_network(file_path, display_flag=display_flag).nodes)


def load_complex(file_path, min_size=1, display_flag=True):
    """
    one complex per line, proteins separated by whitespace

    complexes with less than min_size distinct proteins are dropped
    """
    if display_flag:
        print(f'Loading {file_path}')

    complex = []
    dropped = 0
    for line in read_lines(file_path, 'complex'):
        node_list = line.split()
        if len(node_list) == 0:
            continue
        one = Complex.from_members(node_list)
        if one.size() < min_size:
            dropped += 1
            continue
        complex.append(one)

    if display_flag:
        print(f'complexes = {len(complex)}, dropped (size < {min_size}) = {dropped}')
    return complex


def filter_modules(protein_set_list, protein_name_list, min_protein_num=3,
                   only_intersect_flag=False):
    """
        filter protein sets by the proteins of the current ppi

        a set is kept when at least min_protein_num of its proteins are in the ppi;
        with only_intersect_flag the kept set is cut down to those proteins
    """
    new_protein_set_list = []

    for ref in protein_set_list:
        one = ref.restrict_to(protein_name_list)
        if one.size() >= min_protein_num:
            if only_intersect_flag:
                new_protein_set_list.append(one)
            else:
                new_protein_set_list.append(ref)
    return new_protein_set_list


def match_info_to_frame(match_info_list):
    columns = ['pred_id', 'true_id', 'overlap_score', 'overlap', 'pred', 'true']
    rows = [
        {**info, 'pred': str(info['pred']), 'true': str(info['true'])}
        for info in match_info_list
    ]
    return pd.DataFrame(rows, columns=columns)


def save_table(file_path, data_pd):
    path = os.path.dirname(file_path)
    if path and not os.path.exists(path):
        os.makedirs(path)
    data_pd.to_csv(file_path, sep='\t', index=False)
