class Complex:
    """
    a protein complex: an immutable set of protein names

    complexes read from file are never empty, but an empty one is allowed
    and matches nothing (score 0, overlap 0)
    """

    __slots__ = ('_proteins',)

    def __init__(self, proteins=()):
        object.__setattr__(self, '_proteins', frozenset(proteins))

    def __setattr__(self, name, value):
        raise AttributeError('Complex is immutable')

    def __reduce__(self):
        # joblib workers receive complexes by pickle
        return Complex, (self._proteins,)

    @classmethod
    def from_members(cls, members):
        return cls(str(m) for m in members)

    @property
    def proteins(self):
        return self._proteins

    def size(self):
        return len(self._proteins)

    def is_empty(self):
        return not self._proteins

    def intersection(self, other):
        return self._proteins & other.proteins

    def restrict_to(self, proteins):
        """keep only the members found in `proteins`"""
        return Complex(self._proteins.intersection(proteins))

    def os(self, other):
        """
        overlap score with another complex

        OS(a, b) = |a ∩ b|^2 / (|a| * |b|)

        :return (score, number of shared proteins)
        """
        if self.is_empty() or other.is_empty():
            return 0.0, 0

        common = len(self.intersection(other))
        score = float(pow(common, 2)) / float(self.size() * other.size())
        return score, common

    def __len__(self):
        return len(self._proteins)

    def __iter__(self):
        return iter(sorted(self._proteins))

    def __contains__(self, protein):
        return protein in self._proteins

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self._proteins == other.proteins

    def __hash__(self):
        return hash(self._proteins)

    def __str__(self):
        # same format as one line of a complex file
        return ' '.join(sorted(self._proteins))

    def __repr__(self):
        return f'Complex({sorted(self._proteins)!r})'


def overlap_score(complex_a, complex_b):
    return complex_a.os(complex_b)
