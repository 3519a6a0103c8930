from typing import Callable, List, Sequence, Tuple

# A mutator is a named pure transform; registries are ordered lists of them.
Transform = Callable[[str], str]
Mutator = Tuple[str, Transform]


def mutate(seed: str, mutators: Sequence[Mutator]) -> List[str]:
    """Apply every mutator to the original seed, one output per mutator.

    Mutators are never chained: each one sees the unmodified seed.
    """
    return [transform(seed) for _, transform in mutators]


def mutator_names(mutators: Sequence[Mutator]) -> List[str]:
    return [name for name, _ in mutators]
