from loremud.player import format_inventory


class Narrator:
    def __init__(self, messages):
        """
        The Narrator turns the Director's events into display text.
        It never touches game state; all wording comes from the message catalog.
        """
        self.messages = messages

    def render(self, results):
        return "\n".join(self.render_event(event) for event in results)

    def render_event(self, event):
        event_type = event.get('event_type')
        data = event.get('data', {})

        if event_type == 'error':
            return self.messages.get(event.get('reason'), **event.get('details', {}))
        if event_type == 'look':
            return self._render_look(data)
        if event_type == 'scene_change':
            return self.messages.get('moved', direction=data.get('direction', ''))
        if event_type == 'inventory_add':
            return self.messages.get('picked_up', item=data.get('item', ''))
        if event_type == 'inventory_report':
            return "\n".join([
                self.messages.get('inventory_header'),
                format_inventory(data.get('items', []), self.messages)
            ])
        if event_type == 'help':
            return self.messages.get('help')
        if event_type == 'farewell':
            return self.messages.get('farewell')

        return f"[Narrator Error] Unknown event: {event_type}"

    def _render_look(self, data):
        items = data.get('items', [])
        listing = ", ".join(items) if items else self.messages.get('nothing')
        return "\n".join([
            data.get('description', ''),
            self.messages.get('items_here', items=listing)
        ])
