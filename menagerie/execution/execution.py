# menagerie/execution/execution.py
from typing import Iterable, List

from menagerie.species.registry import create_animal
from menagerie.species.species import Animal


class AnimalPipeline:
    def __init__(self, animals: List[Animal]):
        self.animals = list(animals)

    @classmethod
    def build(cls, descriptors: Iterable[str]) -> "AnimalPipeline":
        """
        Resolve every descriptor up front, so an unknown key fails
        before any animal has made a sound.
        """
        return cls([create_animal(d) for d in descriptors])

    def execute(self) -> int:
        for idx, animal in enumerate(self.animals):
            if animal is None:
                raise ValueError(f"pipeline slot {idx} holds no animal")
            animal.animal_sound()
        return len(self.animals)

    def __len__(self) -> int:
        return len(self.animals)
