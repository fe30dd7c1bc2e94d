from loremud.player import Player


class Session:
    def __init__(self, player, active=True):
        """
        One run of the interpreter. The active flag travels with the session
        instead of living in the loop, so any driver can step it.
        """
        self.player = player
        self.active = active

    def terminated(self):
        return Session(self.player, active=False)

    def __repr__(self):
        return f"Session(room={self.player.current_room_id!r}, active={self.active})"


def new_session(world):
    return Session(Player(world.start_room))


class Director:
    def __init__(self, world):
        """
        The Director is the STATE MACHINE.
        It does not generate text. It mutates the world and player and reports events.
        """
        self.world = world

    # ==========================================================
    # MASTER ROUTER
    # ==========================================================
    def execute(self, session, command):
        """
        Input: {"command": "move", "argument": "forward"}
        Returns (session, [result, ...]). A terminated session is returned untouched.
        """
        if not session.active:
            return session, []

        name = command.get('command', '')
        argument = command.get('argument', '')

        if name == 'look':
            return session, self.look(session)
        elif name == 'move':
            return session, self.move(session, argument)
        elif name == 'pick':
            if argument.startswith("up "):
                return session, self.pick_up(session, argument[len("up "):])
            return session, [self._return_error("malformed_pick")]
        elif name == 'inventory':
            return session, self.report_inventory(session)
        elif name == 'help':
            return session, [{"event_type": "help", "data": {}}]
        elif name in ('quit', 'exit'):
            return session.terminated(), [{"event_type": "farewell", "data": {}}]
        else:
            return session, [self._return_error("unknown_command", {"command": name})]

    # ==========================================================
    # 1. LOOK
    # ==========================================================
    def look(self, session):
        room = self._current_room(session)
        if room is None:
            return [self._return_error("unknown_location")]

        return [{
            "event_type": "look",
            "data": {
                "room_id": room.id,
                "description": room.description,
                "items": room.item_names()
            }
        }]

    # ==========================================================
    # 2. THE SCENE SHIFTER
    # ==========================================================
    def move(self, session, direction):
        if not direction:
            return [self._return_error("direction_required")]

        room = self._current_room(session)
        if room is None:
            return [self._return_error("unknown_location")]

        target_id = room.get_exit(direction)
        if target_id is None:
            return [self._return_error("no_exit", {"direction": direction})]

        session.player.move_to(target_id)

        return [{
            "event_type": "scene_change",
            "data": {"direction": direction, "new_room_id": target_id}
        }] + self.look(session)

    # ==========================================================
    # 3. THE INVENTORY MANAGER
    # ==========================================================
    def pick_up(self, session, item_name):
        room = self._current_room(session)
        if room is None:
            return [self._return_error("unknown_location")]

        item = room.get_item(item_name)
        if item is None:
            return [self._return_error("no_such_item", {"item": item_name})]

        # Both containers change within this call, never one without the other
        room.remove_item(item)
        session.player.add_item(item)

        return [{
            "event_type": "inventory_add",
            "data": {"item": item_name, "item_id": item.id}
        }]

    def report_inventory(self, session):
        return [{
            "event_type": "inventory_report",
            "data": {"items": session.player.inventory_names()}
        }]

    # ==========================================================
    # INTERNAL HELPERS
    # ==========================================================
    def _current_room(self, session):
        return self.world.get_room(session.player.current_room_id)

    def _return_error(self, reason, details=None):
        return {
            "event_type": "error",
            "reason": reason,
            "details": details or {}
        }
