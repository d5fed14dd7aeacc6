"""Générateur MT19937 et tirage borné sans biais de modulo.

Le flux doit rester identique d'une plateforme à l'autre pour une graine
donnée : on tire donc les valeurs brutes 32 bits nous-mêmes et on applique un
échantillonnage par rejet explicite, plutôt que d'utiliser une distribution
uniforme fournie par une bibliothèque (dont le nombre de tirages sous-jacents
n'est pas garanti).
"""

import numpy as np


# Domaine des graines (entier non signé 32 bits)
SEED_MAX = 2**32 - 1


class Mt19937Stream:
    """Flux MT19937 32 bits initialisé comme ``std::mt19937(seed)``.

    L'initialisation passe par la graine "legacy" de ``numpy.random.RandomState``
    (procédure ``init_genrand``), puis l'état est transféré dans un
    ``numpy.random.MT19937`` dont on lit directement les sorties brutes.
    """

    # Plus grande sortie brute ; même borne que le domaine des graines
    MAX = SEED_MAX

    def __init__(self, seed: int):
        seed = int(seed)
        if seed < 0 or seed > SEED_MAX:
            raise ValueError(f"graine hors limites: {seed} (doit être dans [0, {SEED_MAX}])")
        self.seed = seed
        legacy = np.random.RandomState(seed)
        self._bit_generator = np.random.MT19937()
        self._bit_generator.state = legacy.get_state(legacy=False)

    def next_u32(self) -> int:
        """Retourne la prochaine valeur brute dans ``[0, MAX]``."""
        return int(self._bit_generator.random_raw())


def next_bounded(stream: Mt19937Stream, upper_exclusive: int) -> int:
    """Tire un entier uniforme dans ``[0, upper_exclusive)``.

    Args:
        stream: Flux consommé (avancé d'au moins un tirage si ``upper_exclusive > 0``)
        upper_exclusive: Borne supérieure exclue

    Returns:
        Valeur tirée, ou 0 sans consommer le flux si la borne vaut 0
    """
    if upper_exclusive <= 0:
        return 0

    generator_range = stream.MAX + 1
    bucket_size = generator_range // upper_exclusive
    rejection_limit = bucket_size * upper_exclusive

    value = stream.next_u32()
    while value >= rejection_limit:
        value = stream.next_u32()

    return value // bucket_size
