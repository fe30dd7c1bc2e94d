def format_inventory(names, messages):
    """Empty inventory renders its own message, never a blank line."""
    if not names:
        return messages.get('inventory_empty')
    return "\n".join(f"- {name}" for name in names)


class Player:
    def __init__(self, current_room_id=None):
        # Room id, not the Room itself; None means an unknown location
        self.current_room_id = current_room_id
        self.inventory = []

    def move_to(self, room_id):
        self.current_room_id = room_id

    def add_item(self, item):
        self.inventory.append(item)

    def inventory_names(self):
        return [item.name for item in self.inventory]

    def list_inventory(self, messages):
        return format_inventory(self.inventory_names(), messages)
