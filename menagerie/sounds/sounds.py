# menagerie/sounds/sounds.py
from menagerie.registries import SOUNDS


@SOUNDS.register("generic")
def generic_sound() -> None:
    print("The animal makes a sound")

@SOUNDS.register("pig")
def pig_sound() -> None:
    print("The pig says: oink oink")

@SOUNDS.register("dog")
def dog_sound() -> None:
    print("The dog says: bow wow")

@SOUNDS.register("cat")
def cat_sound() -> None:
    print("The cat says: meow meow")
