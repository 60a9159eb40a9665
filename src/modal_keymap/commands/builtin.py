"""Built-in command references the bundled keymap binds to."""

from __future__ import annotations

from .models import CommandRef
from .registry import CommandRegistry

_BUILTIN: tuple[tuple[str, str], ...] = (
    ("application::exit", "Quit the application"),
    ("application::switch_to_normal_mode", "Return to normal mode"),
    ("application::switch_to_insert_mode", "Enter insert mode"),
    ("application::switch_to_select_mode", "Start a character selection"),
    ("application::switch_to_select_line_mode", "Start a line selection"),
    ("application::switch_to_search_mode", "Start a search query"),
    ("application::switch_to_jump_mode", "Label visible tokens for jumping"),
    ("application::switch_to_line_jump_mode", "Prompt for a line number"),
    ("application::switch_to_path_mode", "Prompt for a buffer path"),
    ("application::display_default_keymap", "Open the default keymap"),
    ("buffer::save", "Write the buffer to disk"),
    ("buffer::close", "Close the current buffer"),
    ("buffer::undo", "Undo the last change"),
    ("buffer::redo", "Redo the last undone change"),
    ("buffer::backspace", "Delete the character before the cursor"),
    ("buffer::delete", "Delete the character under the cursor"),
    ("buffer::delete_line", "Delete the current line"),
    ("buffer::insert_char", "Insert the typed character"),
    ("buffer::insert_newline", "Break the line at the cursor"),
    ("buffer::insert_tab", "Insert indentation at the cursor"),
    ("buffer::change_token", "Replace the token under the cursor"),
    ("buffer::paste", "Paste after the cursor"),
    ("buffer::paste_above", "Paste above the current line"),
    ("buffer::indent_line", "Indent the current line"),
    ("buffer::outdent_line", "Outdent the current line"),
    ("buffer::toggle_line_comment", "Comment or uncomment the current line"),
    ("cursor::move_up", "Move the cursor up one line"),
    ("cursor::move_down", "Move the cursor down one line"),
    ("cursor::move_left", "Move the cursor left one character"),
    ("cursor::move_right", "Move the cursor right one character"),
    ("cursor::move_to_start_of_line", "Move the cursor to column zero"),
    ("cursor::move_to_end_of_line", "Move the cursor past the last character"),
    ("cursor::move_to_first_word_of_line", "Move the cursor to the first word"),
    ("cursor::move_to_first_line", "Move the cursor to the first line"),
    ("cursor::move_to_last_line", "Move the cursor to the last line"),
    ("cursor::insert_at_end_of_line", "Append at the end of the line"),
    ("cursor::insert_with_newline", "Open a line below and insert"),
    ("cursor::insert_with_newline_above", "Open a line above and insert"),
    ("search::move_to_next_result", "Jump to the next search match"),
    ("search::move_to_previous_result", "Jump to the previous search match"),
    ("search::accept_query", "Run the typed search query"),
    ("search::push_search_char", "Append a character to the query"),
    ("search::pop_search_char", "Remove the last query character"),
    ("selection::copy", "Copy the selection"),
    ("selection::delete", "Delete the selection"),
    ("selection::change", "Replace the selection"),
    ("selection::select_all", "Select the whole buffer"),
    ("view::scroll_up", "Scroll the view up"),
    ("view::scroll_down", "Scroll the view down"),
    ("view::scroll_to_cursor", "Centre the view on the cursor"),
    ("jump_mode::match_tag", "Narrow jump labels by the typed character"),
    ("line_jump::push_search_char", "Append a digit to the line number"),
    ("line_jump::pop_search_char", "Remove the last digit"),
    ("line_jump::accept_input", "Jump to the typed line"),
    ("confirm::confirm_command", "Run the pending confirmed command"),
    ("path::push_char", "Append a character to the path"),
    ("path::pop_char", "Remove the last path character"),
    ("path::accept_path", "Use the typed path"),
)

BUILTIN_COMMANDS: tuple[CommandRef, ...] = tuple(
    CommandRef(id=command_id, description=description, metadata={"builtin": True})
    for command_id, description in _BUILTIN
)


def default_registry() -> CommandRegistry:
    """Return a fresh registry holding every built-in command."""

    return CommandRegistry(BUILTIN_COMMANDS)


__all__ = ["BUILTIN_COMMANDS", "default_registry"]
