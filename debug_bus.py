import sys, os
ROOT=os.path.dirname(__file__); SRC=os.path.join(ROOT,'src');
if SRC not in sys.path: sys.path.insert(0,SRC)
import random
from rockdrop.events import bus as events
from rockdrop.events.bus import EventBus, EVENT_TICK
from rockdrop.world import create_world
from rockdrop.components.command_queue import Command
from rockdrop.systems.game_session import GameSession

def printer(name):
    def _print(sender, **payload):
        print(name, payload)
    return _print

bus=EventBus(); world=create_world(bus, rng=random.Random(int(sys.argv[1]) if len(sys.argv) > 1 else 0))
for attr in dir(events):
    if attr.startswith('EVENT_') and attr != 'EVENT_TICK':
        bus.subscribe(getattr(events, attr), printer(getattr(events, attr)))
session=GameSession(world,bus)
session.start()
while session.status.name == 'PLAYING':
    session.enqueue(random.choice([Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.ROTATE]))
    session.enqueue(Command.HARD_DROP)
    bus.emit(EVENT_TICK, dt=1/60)
print('Final state', session.state)
