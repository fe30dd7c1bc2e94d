import os
import json
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.theme import Theme

from loremud.director import new_session
from loremud.interpreter import Interpreter
from loremud.messages import DEFAULT_LANGUAGE, UnknownLanguageError, available_languages, load_messages
from loremud.world import DEFAULT_WORLD_PATH, WorldDataError, load_world

# --- CONFIGURATION ---
CONFIG_PATH = "config.yaml"
DEFAULT_CONFIG = {
    "language": DEFAULT_LANGUAGE,
    "debug_mode": False,
    "world_file": None,
}

# 1. SETUP THEME
custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

console = Console(theme=custom_theme)


def load_config(path=CONFIG_PATH, out=None):
    """
    Loads config.yaml over the defaults. The file is optional and never written.
    """
    out = out if out is not None else console
    config = dict(DEFAULT_CONFIG)
    if not os.path.exists(path):
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        out.print(Panel(f"[warning]CONFIG ERROR:[/] {path} could not be read, using defaults.\nDetails: {escape(str(e))}", border_style="warning"))
        return config

    if not isinstance(loaded, dict):
        out.print(Panel(f"[warning]CONFIG ERROR:[/] {path} must be a mapping, using defaults.", border_style="warning"))
        return config

    for key in DEFAULT_CONFIG:
        if key in loaded:
            config[key] = loaded[key]
    return config


def load_catalog(language, out=None):
    out = out if out is not None else console
    try:
        return load_messages(language)
    except UnknownLanguageError:
        out.print(Panel(f"[warning]Unknown language '{escape(str(language))}', falling back to '{DEFAULT_LANGUAGE}'.[/]\nAvailable: {', '.join(available_languages())}", border_style="warning"))
        return load_messages(DEFAULT_LANGUAGE)


def show_results(narrator, results, out):
    for event in results:
        style = "warning" if event.get('event_type') == 'error' else "text"
        out.print(narrator.render_event(event), style=style, markup=False, highlight=False)


def show_debug(title, payload, out):
    out.print(Panel(f"[dim]{escape(json.dumps(payload, indent=2, ensure_ascii=False))}[/dim]", title=title, border_style="dim"))


# ============================================
# GAME LOOP
# ============================================
def play(interpreter, session, out=None, ask=None, debug=False):
    """
    Reads and applies lines until the session is terminated.
    End of input counts as quit. Returns the final session.
    """
    out = out if out is not None else console
    ask = ask or (lambda: Prompt.ask("[info]>[/info]", console=out))
    narrator = interpreter.narrator

    out.print(narrator.messages.get('welcome'), style="info", markup=False)
    title = interpreter.director.world.title
    if title:
        out.print(f"*** {title} ***", style="info", markup=False)

    while session.active:
        try:
            user_input = ask()
        except (EOFError, KeyboardInterrupt):
            user_input = "quit"

        session, command, results = interpreter.turn(session, user_input)

        if debug:
            show_debug("[DEBUG: Listener Output]", command, out)
            show_debug("[DEBUG: Director Output]", results, out)

        show_results(narrator, results, out)

    return session


# ============================================
# MAIN
# ============================================
def main():
    config = load_config()
    messages = load_catalog(config.get('language') or DEFAULT_LANGUAGE)
    world_path = config.get('world_file') or DEFAULT_WORLD_PATH

    try:
        world = load_world(world_path)
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: World data not found.[/] Missing file: {escape(str(e))}", border_style="warning"))
        return
    except (OSError, UnicodeDecodeError) as e:
        console.print(Panel(f"[warning]ERROR: World data could not be read.[/] {escape(str(e))}", border_style="warning"))
        return
    except yaml.YAMLError as e:
        console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck your world file for indentation or syntax errors.\nDetails: {escape(str(e))}", border_style="warning"))
        return
    except WorldDataError as e:
        console.print(Panel(f"[warning]WORLD DATA ERROR:[/]\n{escape(str(e))}", border_style="warning"))
        return

    interpreter = Interpreter(world, messages)
    play(interpreter, new_session(world), debug=config.get('debug_mode', False))


if __name__ == "__main__":
    main()
