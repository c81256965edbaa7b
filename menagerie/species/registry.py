# menagerie/species/registry.py
from menagerie.registries import ANIMALS
from menagerie.species.species import Animal


def create_animal(key: str) -> Animal:
    """Build a fresh animal for `key`. Unknown keys raise KeyError listing what is available."""
    animal_cls = ANIMALS.get(key)
    return animal_cls()
