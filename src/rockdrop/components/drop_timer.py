from __future__ import annotations

from dataclasses import dataclass, field

from rockdrop.constants import INITIAL_SPEED_MS


@dataclass(slots=True)
class DropTimer:
	"""Gravity clock fed by frame deltas.

	``advance`` reports at most one due tick per call. Time that passes while the
	timer is stopped is never replayed, and a long frame does not queue up
	several drops.
	"""

	interval_ms: float = INITIAL_SPEED_MS
	running: bool = False

	_elapsed_ms: float = field(init=False, default=0.0, repr=False)

	def start(self) -> None:
		self.running = True
		self._elapsed_ms = 0.0

	def stop(self) -> None:
		self.running = False
		self._elapsed_ms = 0.0

	def configure(self, interval_ms: float) -> None:
		interval = float(interval_ms)
		if interval <= 0.0:
			raise ValueError(f"Drop interval must be positive, got {interval_ms!r}")
		self.interval_ms = interval

	def advance(self, dt_ms: float) -> bool:
		if not self.running:
			return False
		self._elapsed_ms += max(0.0, float(dt_ms))
		if self._elapsed_ms < self.interval_ms:
			return False
		self._elapsed_ms -= self.interval_ms
		if self._elapsed_ms >= self.interval_ms:
			# Backlog from a long frame is dropped.
			self._elapsed_ms = 0.0
		return True

	@property
	def elapsed_ms(self) -> float:
		return self._elapsed_ms
