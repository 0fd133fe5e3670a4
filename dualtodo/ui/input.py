"""
Input handling for dualtodo.

Processes key events for each mode (normal, editing) and updates the editor
state accordingly. Keys that mean nothing in the current mode are ignored.
"""
from dualtodo import keys

def dispatch(state, key):
    """Route one key to the handler for the current mode and return the state."""
    if state.mode == "normal":
        handle_normal_mode(state, key)
    elif state.mode == "editing":
        handle_editing_mode(state, key)
    return state

def handle_normal_mode(state, key):
    """Handle a key press in normal mode."""
    if key == keys.KEY_EDIT:
        state.mode = "editing"
        state.log_command("e: edit")
        return

    if key == keys.KEY_QUIT:
        state.log_command("q: quit")
        state.graceful_exit()
        return

    if key == keys.KEY_SWITCH:
        state.switch_active_list()
        state.log_command(f"t: switch to {state.target}")
        return

    if key == keys.KEY_REMOVE:
        state.remove_current()
        state.log_command("r: remove entry")
        return

    if key == keys.KEY_DONE:
        state.mark_done()
        state.log_command(f"d: done (row {state.row + 1})")
        return

    direction = keys.ARROW_DIRECTIONS.get(key)
    if direction is not None:
        state.move_cursor(direction)

def handle_editing_mode(state, key):
    """Handle a key press in editing mode."""
    if key in keys.ENTER_KEYS:
        state.commit_line()
        state.log_command("enter: commit line")
        return

    # ESC -> normal mode; the entry already holds everything typed so far
    if key in keys.ESC_KEYS:
        state.mode = "normal"
        state.log_command("esc: stop editing")
        return

    if key in keys.BACKSPACE_KEYS:
        state.delete_char()
        return

    if keys.is_character(key):
        state.insert_char(key)
        return

    direction = keys.ARROW_DIRECTIONS.get(key)
    if direction is not None:
        state.move_cursor(direction)
