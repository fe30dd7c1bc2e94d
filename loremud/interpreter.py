from loremud.director import Director
from loremud.listener import Listener
from loremud.narrator import Narrator


class Interpreter:
    def __init__(self, world, messages):
        self.listener = Listener()
        self.director = Director(world)
        self.narrator = Narrator(messages)

    def turn(self, session, user_input):
        """Listener -> Director. Returns (session, command, results) without rendering."""
        command = self.listener.parse(user_input)
        session, results = self.director.execute(session, command)
        return session, command, results

    def step(self, session, user_input):
        """Applies one line of input: returns (session, text)."""
        session, _, results = self.turn(session, user_input)
        return session, self.narrator.render(results)
