from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GeneratorConfig:
    width: int = 51
    height: int = 51
    room_tries: int = 30
    # Each step adds 2 to the largest possible room side.
    room_extra_size: int = 0
    # Percent chance that a room asks for a third, redundant door.
    extra_connector_chance: int = 20
    # 0 keeps corridors straight whenever possible, 100 turns at random.
    winding_percent: int = 0
    remove_dead_ends: bool = True
    enemy_count: int = 10
    # Opens extra doors until every region is joined; off keeps the plain per-room pass.
    ensure_connected: bool = False

    def validate(self) -> "GeneratorConfig":
        for name in ("room_tries", "room_extra_size", "enemy_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        for name in ("extra_connector_chance", "winding_percent"):
            if not 0 <= getattr(self, name) <= 100:
                raise ValueError(f"{name} must be within 0..100, got {getattr(self, name)}")
        return self

    def round_up_odd(self) -> "GeneratorConfig":
        return replace(self, width=self.width | 1, height=self.height | 1)


DEFAULTS = GeneratorConfig()
