"""Tests pour twenty48/core/sampler.py."""

import pytest

from twenty48.core.sampler import SEED_MAX, Mt19937Stream, next_bounded


class _ScriptedStream:
    """Flux factice renvoyant des valeurs brutes prédéfinies."""

    MAX = 2**32 - 1

    def __init__(self, values):
        self.values = list(values)
        self.draws = 0

    def next_u32(self):
        self.draws += 1
        return self.values.pop(0)


def test_mt19937_reference_sequence():
    """Le flux reproduit la séquence MT19937 de référence (graine 5489)."""
    stream = Mt19937Stream(5489)
    assert [stream.next_u32() for _ in range(4)] == [
        3499211612,
        581869302,
        3890346734,
        3586334585,
    ]


def test_mt19937_ten_thousandth_value():
    """La 10000e sortie pour la graine 5489 vaut 4123659995."""
    stream = Mt19937Stream(5489)
    value = None
    for _ in range(10000):
        value = stream.next_u32()
    assert value == 4123659995


def test_mt19937_seed_1234_first_value():
    """Première sortie brute pour la graine 1234 (ancrage multiplateforme)."""
    assert Mt19937Stream(1234).next_u32() == 822569775


def test_output_range_matches_seed_domain():
    """Les sorties brutes et les graines partagent la même borne 32 bits."""
    assert Mt19937Stream.MAX == SEED_MAX == 2**32 - 1


def test_same_seed_same_stream():
    """Deux flux de même graine sont identiques."""
    a = Mt19937Stream(1234)
    b = Mt19937Stream(1234)
    assert [a.next_u32() for _ in range(50)] == [b.next_u32() for _ in range(50)]


@pytest.mark.parametrize("seed", [-1, SEED_MAX + 1])
def test_seed_out_of_range(seed):
    """Test le rejet des graines hors de [0, 2**32)."""
    with pytest.raises(ValueError, match="hors limites"):
        Mt19937Stream(seed)


def test_seed_bounds_accepted():
    """Test les graines extrêmes."""
    assert Mt19937Stream(0).seed == 0
    assert Mt19937Stream(SEED_MAX).seed == SEED_MAX


def test_next_bounded_zero_does_not_draw():
    """Une borne nulle renvoie 0 sans consommer le flux."""
    stream = _ScriptedStream([])
    assert next_bounded(stream, 0) == 0
    assert stream.draws == 0


def test_next_bounded_rejects_biased_values():
    """Les valeurs au-delà du dernier seau complet sont retirées."""
    bucket = (2**32) // 10
    limit = bucket * 10
    stream = _ScriptedStream([2**32 - 1, limit, 5])

    assert next_bounded(stream, 10) == 0
    assert stream.draws == 3


def test_next_bounded_divides_by_bucket():
    """La valeur acceptée est divisée par la taille du seau (pas de modulo)."""
    bucket = (2**32) // 10
    stream = _ScriptedStream([bucket * 7 + 3])
    assert next_bounded(stream, 10) == 7

    # Puissance de deux : on garde les bits de poids fort
    stream = _ScriptedStream([0xC0000000])
    assert next_bounded(stream, 4) == 3


def test_next_bounded_one_always_zero():
    """Borne 1 : un seul tirage, toujours 0."""
    stream = _ScriptedStream([2**32 - 1])
    assert next_bounded(stream, 1) == 0
    assert stream.draws == 1


@pytest.mark.parametrize("bound", [1, 2, 3, 7, 10, 16])
def test_next_bounded_range(bound):
    """Toutes les valeurs tirées sont dans [0, bound) et toutes apparaissent."""
    stream = Mt19937Stream(42)
    seen = {next_bounded(stream, bound) for _ in range(2000)}
    assert seen == set(range(bound))
