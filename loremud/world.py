import os
import yaml

DEFAULT_WORLD_PATH = os.path.join(os.path.dirname(__file__), "data", "world.yaml")


class WorldDataError(Exception):
    """Raised when world data is malformed or references rooms that do not exist."""


# ==========================================
# CORE OBJECT MODEL
# ==========================================

class Item:
    def __init__(self, id, name=None):
        self.id = id
        self.name = name or id

    def match_name(self, name):
        return self.name.lower() == name.lower()

    def __repr__(self):
        return f"Item({self.id!r})"


class Room:
    def __init__(self, id, description="", exits=None):
        self.id = id
        self.description = description
        self.items = []
        # direction -> target room id
        self.exits = dict(exits or {})

    def item_names(self):
        return [item.name for item in self.items]

    def get_item(self, name):
        for item in self.items:
            if item.match_name(name):
                return item
        return None

    def remove_item(self, item):
        self.items.remove(item)

    def get_exit(self, direction):
        return self.exits.get(direction)

    def __repr__(self):
        return f"Room({self.id!r})"


class World:
    def __init__(self, data):
        """
        Builds the room arena from a world definition:
        {"title": ..., "start_room": ..., "rooms": [{"id", "description", "items", "exits"}]}
        Raises WorldDataError on anything that does not fit that shape.
        """
        if not isinstance(data, dict):
            raise WorldDataError("world data must be a mapping")
        self.title = data.get('title')
        self.rooms = {}
        self._load_data(data)

        default_start = next(iter(self.rooms), None)
        start_room = data.get('start_room')
        self.start_room = str(start_room) if start_room is not None else default_start
        if self.start_room is not None and self.start_room not in self.rooms:
            raise WorldDataError(f"start room '{self.start_room}' is not defined")

    def _load_data(self, data):
        rooms = data.get('rooms') or []
        if not isinstance(rooms, list):
            raise WorldDataError("'rooms' must be a list of rooms")

        for index, room_data in enumerate(rooms):
            if not isinstance(room_data, dict) or 'id' not in room_data:
                raise WorldDataError(f"room #{index + 1} must be a mapping with an 'id'")
            room_id = str(room_data['id'])
            if room_id in self.rooms:
                raise WorldDataError(f"room '{room_id}' is defined twice")

            exits = room_data.get('exits') or {}
            if not isinstance(exits, dict):
                raise WorldDataError(f"exits of room '{room_id}' must be a mapping")
            items = room_data.get('items') or []
            if not isinstance(items, list):
                raise WorldDataError(f"items of room '{room_id}' must be a list")

            room = Room(
                room_id,
                str(room_data.get('description') or ""),
                {str(direction): str(target) for direction, target in exits.items()}
            )
            self.rooms[room_id] = room
            for item_data in items:
                room.items.append(self._load_item(item_data, room_id))

        # Exits are resolved after every room exists
        for room in self.rooms.values():
            for direction, target in room.exits.items():
                if target not in self.rooms:
                    raise WorldDataError(
                        f"exit '{direction}' of room '{room.id}' leads to unknown room '{target}'"
                    )

    def _load_item(self, data, room_id):
        if isinstance(data, str):
            return Item(data)
        if not isinstance(data, dict) or data.get('id') is None:
            raise WorldDataError(
                f"item {data!r} in room '{room_id}' must be a name or a mapping with an 'id'"
            )
        name = data.get('name')
        return Item(str(data['id']), str(name) if name is not None else None)

    def get_room(self, room_id):
        if room_id is None:
            return None
        return self.rooms.get(room_id)


def load_world(path=DEFAULT_WORLD_PATH):
    """
    Loads a world YAML file. Raises FileNotFoundError, yaml.YAMLError or WorldDataError.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return World(data)
