# menagerie/species/species.py
import logging
from typing import Callable, Optional

from menagerie.registries import ANIMALS, SOUNDS
import menagerie.sounds.sounds  # ensure registration

logger = logging.getLogger("menagerie")


class Animal:
    sound_key: Optional[str] = None

    def resolve_sound_emitter(self) -> Optional[Callable[[], None]]:
        """
        Look up this animal's emitter in SOUNDS.
        Returns None if the animal has no sound key or the key isn't registered.
        """
        if self.sound_key is None:
            return None
        try:
            return SOUNDS.get(self.sound_key)
        except KeyError:
            return None

    def animal_sound(self) -> None:
        emit = self.resolve_sound_emitter()
        if emit is None:
            logger.error(f"No sound available for {type(self).__name__}")
            return
        emit()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sound_key={self.sound_key!r})"


@ANIMALS.register("animal")
class GenericAnimal(Animal):
    sound_key = "generic"

@ANIMALS.register("pig")
class Pig(Animal):
    sound_key = "pig"

@ANIMALS.register("dog")
class Dog(Animal):
    sound_key = "dog"

@ANIMALS.register("cat")
class Cat(Animal):
    sound_key = "cat"
