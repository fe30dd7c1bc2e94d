class Listener:
    def parse(self, user_input):
        """
        Maps one line of player input to a command dict.
        Input: "  Move  Forward " -> {"command": "move", "argument": "forward"}
        The argument is everything after the first run of whitespace, or "".
        """
        text = user_input.strip().lower()
        parts = text.split(None, 1)

        command = parts[0] if parts else ""
        argument = parts[1] if len(parts) > 1 else ""

        return {"command": command, "argument": argument}
