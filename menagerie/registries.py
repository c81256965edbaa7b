# menagerie/registries.py
from menagerie.registry import Registry

ANIMALS = Registry("animal")
SOUNDS  = Registry("sound")
