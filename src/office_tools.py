#!/usr/bin/env python3
"""
Office Tools: a tabbed terminal shell around two utilities.

  📋 Log Extractor    paste JSON (even objects glued together), get the log lines
  🔐 Encryption Tool  AES-encrypt text with a passphrase

The initial tab comes from --tool or OFFICE_TOOLS_TOOL, the terminal stand-in
for a URL hash; unknown ids are ignored.
"""

import os
import sys
import curses
import argparse
from pathlib import Path

from officekit.debug_utils import (
    ensure_debug_dir,
    log_debug,
    log_exception
)
from officekit.encryption_tool import (
    ALERT_DISPLAY_MS,
    SCHEME_ARGON2_GCM,
    SCHEME_OPENSSL,
    EncryptionInputError,
    decrypt_text,
    encrypt_text
)
from officekit.input_utils import get_menu_choice, get_secret, read_multiline
from officekit.log_processor import env_value
from officekit.log_session import LogExtractorSession
from officekit.ui_utils import show_alert, tab_select

TOOLS = [
    {
        "id": "log-extractor",
        "name": "Log Extractor",
        "description": "Extract log text from JSON data",
        "icon": "📋",
    },
    {
        "id": "encryption-tool",
        "name": "Encryption Tool",
        "description": "Encrypt text using AES-256",
        "icon": "🔐",
    },
]
DEFAULT_TOOL_ID = "log-extractor"


def resolve_tool_id(requested, current=DEFAULT_TOOL_ID):
    if requested and any(t["id"] == requested for t in TOOLS):
        return requested
    return current


def parse_args(argv=None):
    ap = argparse.ArgumentParser("office-tools", description="Productivity utilities for your workflow")
    ap.add_argument("--tool", default=os.environ.get("OFFICE_TOOLS_TOOL"),
                    help="Tool to open first: " + ", ".join(t["id"] for t in TOOLS))
    ap.add_argument("--export-dir", type=Path,
                    default=Path(os.environ.get("OFFICE_TOOLS_EXPORT_DIR", ".")))
    ap.add_argument("--max-buffer", type=int, default=env_value("OFFICE_TOOLS_MAX_SCAN_BUFFER"))
    ap.add_argument("--no-curses", action="store_true", help="Use numbered text menus only")
    return ap.parse_args(argv)


# ---------- navigation ----------

def text_tab_select(current_id):
    print("\n=== Office Tools ===")
    for i, tool in enumerate(TOOLS, 1):
        mark = "*" if tool["id"] == current_id else " "
        print(f"{mark} Press {i} - {tool['icon']} {tool['name']}: {tool['description']}")
    print("  Press q - Quit")
    choice_ = get_menu_choice("Choice: ", [str(i) for i in range(1, len(TOOLS) + 1)] + ["q"])
    if choice_ == "q":
        return None
    return TOOLS[int(choice_) - 1]["id"]


def select_tool(current_id, use_curses):
    if use_curses:
        try:
            return curses.wrapper(lambda s: tab_select(s, TOOLS, current_id)), True
        except curses.error as e:
            log_exception(e, "Curses error in tab bar; falling back to text menu", component="UI")
            print(f"A Curses error occurred: {e}. Falling back to text menus.")
    return text_tab_select(current_id), False


def alert(message, use_curses):
    log_debug(f"Alert: {message}", level="INFO", component="UI")
    if use_curses:
        try:
            curses.wrapper(lambda s: show_alert(s, message, ALERT_DISPLAY_MS))
            return
        except curses.error:
            pass
    print(f"\n[!] {message}\n")


# ---------- Log Extractor ----------

def print_log_view(session):
    print("\n--- Extracted Logs ---\n")
    print(session.log_output)
    if session.stats:
        print(f"\nTotal Entries: {session.stats['total_count']}    "
              f"Total Characters: {session.stats['char_count']}")


def run_log_extractor(session, export_dir):
    while True:
        print("\n=== 📋 Log Text Extractor ===")
        print("Press e - Paste JSON and extract logs")
        options = ["e", "c", "b"]
        if session.stats:
            print(f"Press y - {session.copy_label}")
            print("Press s - 💾 Export to File")
            options += ["y", "s"]
        print("Press c - 🗑️ Clear")
        print("Press b - Back to tools")
        choice_ = get_menu_choice("Choice: ", options)

        if choice_ == "e":
            session.extract_logs(read_multiline("Paste your JSON here:", verbatim=True))
            print_log_view(session)
        elif choice_ == "y":
            session.copy_logs()
            print(session.copy_label)
            session.reset_copy_label()
        elif choice_ == "s":
            path = session.export_logs(export_dir)
            if path:
                print(f"Saved: {path}")
            elif session.export_error:
                print(f"\n[!] {session.export_error}\n")
        elif choice_ == "c":
            session.clear()
            print_log_view(session)
        else:
            return


# ---------- Encryption Tool ----------

def run_encryption_tool(use_curses):
    key = ""
    text = ""
    output = ""
    scheme = SCHEME_OPENSSL
    while True:
        print("\n=== 🔐 Text Encryption Tool ===")
        print(f"Encryption Key: {'(set)' if key else '(empty)'}   Scheme: {scheme}")
        print(f"Input Text: {len(text)} chars")
        if output:
            print(f"Output:\n{output}")
        print("\nPress k - Enter encryption key")
        print("Press t - Enter input text")
        print("Press m - Switch scheme (openssl / argon2-gcm)")
        print("Press v - Convert (encrypt)")
        print("Press d - Decrypt input text")
        print("Press c - Clear")
        print("Press b - Back to tools")
        choice_ = get_menu_choice("Choice: ", ["k", "t", "m", "v", "d", "c", "b"])

        if choice_ == "k":
            key = get_secret("Encryption Key: ")
        elif choice_ == "t":
            text = read_multiline("Input Text:")
        elif choice_ == "m":
            scheme = SCHEME_ARGON2_GCM if scheme == SCHEME_OPENSSL else SCHEME_OPENSSL
        elif choice_ in ("v", "d"):
            try:
                output = encrypt_text(key, text, scheme) if choice_ == "v" else decrypt_text(key, text)
            except EncryptionInputError as e:
                alert(str(e), use_curses)
        elif choice_ == "c":
            key, text, output = "", "", ""
        else:
            return


def open_tool(tool_id, session, export_dir, use_curses):
    log_debug(f"Opening tool: {tool_id}", level="INFO", component="UI")
    if tool_id == "log-extractor":
        run_log_extractor(session, export_dir)
    elif tool_id == "encryption-tool":
        run_encryption_tool(use_curses)


def main(argv=None):
    args = parse_args(argv)
    ensure_debug_dir()
    current_id = resolve_tool_id(args.tool)
    use_curses = not args.no_curses
    session = LogExtractorSession(max_buffer=args.max_buffer)
    log_debug("Shell started.", level="INFO", component="SYSTEM",
              details={"tool": current_id, "curses": use_curses})

    try:
        # a valid --tool opens straight into that tool
        if resolve_tool_id(args.tool, None):
            open_tool(current_id, session, args.export_dir, use_curses)
        while True:
            picked, use_curses = select_tool(current_id, use_curses)
            if picked is None:
                break
            current_id = resolve_tool_id(picked, current_id)
            open_tool(current_id, session, args.export_dir, use_curses)
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
    except Exception as exc_main:
        log_exception(exc_main, "Fatal error in main()")
        print(f"FATAL ERROR: {exc_main}")
        sys.exit(1)
    log_debug("Shell closed.", level="INFO", component="SYSTEM")


if __name__ == "__main__":
    main()
