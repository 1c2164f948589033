from jazz.models.heart import DamageClass, HeartIcon, damage_class_for, render_lives
from jazz.models.vitals import VitalsState, heal, hit, init_state, start

__all__ = [
    "DamageClass", "HeartIcon", "damage_class_for", "render_lives",
    "VitalsState", "heal", "hit", "init_state", "start",
]
