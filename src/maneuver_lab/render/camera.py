from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CameraState:
    ppm: float
    ppm_target: float


class Camera:
    """Body-centred camera that eases its zoom towards the slider value.

    Zoom follows the dashboard convention of pixels per kilometre; internally
    the camera works in pixels per metre (``ppm``).
    """

    def __init__(self, size: tuple[int, int], zoom: float) -> None:
        self._size = size
        ppm = zoom / 1000.0
        self._state = CameraState(ppm=ppm, ppm_target=ppm)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def update_size(self, size: tuple[int, int]) -> None:
        self._size = size

    @property
    def ppm(self) -> float:
        return self._state.ppm

    @property
    def center(self) -> tuple[int, int]:
        width, height = self._size
        return width // 2, height // 2

    def set_zoom(self, zoom: float) -> None:
        self._state.ppm = self._state.ppm_target = zoom / 1000.0

    def set_zoom_target(self, zoom: float) -> None:
        self._state.ppm_target = zoom / 1000.0

    def update(self, smoothing: float = 0.2) -> None:
        state = self._state
        state.ppm += (state.ppm_target - state.ppm) * smoothing

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        cx, cy = self.center
        return cx + int(x * self._state.ppm), cy - int(y * self._state.ppm)

    def meters_to_pixels(self, length: float) -> int:
        return int(length * self._state.ppm)
