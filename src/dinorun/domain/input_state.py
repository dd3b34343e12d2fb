from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    # All flags are true only on the frame the input was pressed.
    trigger_pressed: bool = False   # start when idle/ended, jump when running
    restart_pressed: bool = False   # start when idle/ended, ignored while running
    mute_pressed: bool = False
