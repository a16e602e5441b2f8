#!/usr/bin/env python3
"""
Start Page Tool

Browse and edit the start page from the terminal.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List

from dashboard import (
    Colors,
    DashboardError,
    Document,
    Item,
    Mozlz4Storage,
    SimulatedCleaner,
    TreeStore,
    export_to_html,
    setup_logging,
)
from dashboard.cleaner import ClearDataRequest
from dashboard.config import FAVORITES_ID, default_data_path
from dashboard.store import time_id


def print_items(items: List[Item], depth: int = 1):
    indent = "  " * depth
    for item in items:
        ident = f"{Colors.GREY}[{item.id}]{Colors.RESET}"
        if item.is_folder:
            print(f"{indent}{Colors.YELLOW}+ {item.title}{Colors.RESET} {ident}")
            print_items(item.items or [], depth + 1)
        elif item.is_action:
            print(f"{indent}{Colors.MAGENTA}* {item.title}{Colors.RESET} {ident}")
        else:
            print(f"{indent}- {item.title} {Colors.GREY}{item.url}{Colors.RESET} {ident}")


def print_document(document: Document):
    for section in document.sections:
        marker = f" {Colors.GREY}(hidden){Colors.RESET}" if section.hidden else ""
        print(f"\n{Colors.BOLD}{section.title}{Colors.RESET}{marker} {Colors.GREY}[{section.id}]{Colors.RESET}")
        print_items(section.items)


def print_header(data_path: Path):
    """Print application header."""
    print()
    print("=" * 60)
    print(f"{Colors.BOLD}Start Page Tool{Colors.RESET}")
    print(f"{Colors.GREY}{data_path}{Colors.RESET}")
    print("=" * 60)


def print_menu():
    """Print main menu."""
    print()
    print("Choose an option:")
    print()
    print(f"  {Colors.CYAN}1{Colors.RESET}. Show start page")
    print(f"  {Colors.CYAN}2{Colors.RESET}. Add page to Favorites")
    print(f"  {Colors.CYAN}3{Colors.RESET}. Rename item")
    print(f"  {Colors.CYAN}4{Colors.RESET}. Delete item")
    print()
    print(f"  {Colors.CYAN}5{Colors.RESET}. Move item into folder or Favorites")
    print(f"  {Colors.CYAN}6{Colors.RESET}. Reorder item")
    print(f"  {Colors.CYAN}7{Colors.RESET}. Merge two items into a folder")
    print(f"  {Colors.CYAN}8{Colors.RESET}. Show/hide section")
    print()
    print(f"  {Colors.YELLOW}9{Colors.RESET}. Export to HTML file")
    print(f"  {Colors.YELLOW}10{Colors.RESET}. Clear browsing data (24h)")
    print()
    print(f"  {Colors.GREY}0{Colors.RESET}. Exit")
    print()


def ask(prompt: str) -> str:
    return input(f"{prompt}: ").strip()


def show(store: TreeStore):
    document = asyncio.run(store.get_sections())
    print_document(document)


def add_page(store: TreeStore):
    url = ask("URL")
    if not url:
        print(f"{Colors.RED}URL is required.{Colors.RESET}")
        return
    title = ask("Title (Enter for URL)") or url
    document = asyncio.run(store.save_item_to_favorites(Item.link(time_id(), title, url)))
    print(f"\n{Colors.GREEN}Added to Favorites.{Colors.RESET}")
    print_document(document)


def rename(store: TreeStore):
    item_id = ask("Item id")
    title = ask("New title")
    if not title:
        print("Cancelled.")
        return
    print_document(asyncio.run(store.rename_item(item_id, title)))


def delete(store: TreeStore):
    item_id = ask("Item id")
    confirm = input(f"{Colors.YELLOW}Delete '{item_id}'? (yes/no):{Colors.RESET} ").strip().lower()
    if confirm != "yes":
        print("Cancelled.")
        return
    print_document(asyncio.run(store.delete_item(item_id)))


def move(store: TreeStore):
    item_id = ask("Item id")
    target = ask(f"Folder id (Enter for {FAVORITES_ID})") or FAVORITES_ID
    print_document(asyncio.run(store.move_item(item_id, target)))


def reorder(store: TreeStore):
    source = ask("Item id to move")
    target = ask("Put it where this item id is")
    print_document(asyncio.run(store.reorder_item(source, target)))


def merge(store: TreeStore):
    source = ask("Item id to drop")
    target = ask("Item id to drop it on")
    print_document(asyncio.run(store.create_folder_with_items(source, target)))


def toggle(store: TreeStore):
    section_id = ask("Section id")
    print_document(asyncio.run(store.toggle_section_visibility(section_id)))


def export(store: TreeStore):
    output_input = ask("Output filename (Enter for auto)")
    output_path = Path(output_input) if output_input else None
    bookmarks, folders = asyncio.run(export_to_html(store, output_path))
    print()
    print(f"{Colors.GREEN}Export completed!{Colors.RESET}")
    print(f"  Bookmarks: {bookmarks}")
    print(f"  Folders: {folders}")


def clear_data():
    print("Cleaning browsing data...")
    ok = asyncio.run(SimulatedCleaner().clear(ClearDataRequest.last_day()))
    if ok:
        print(f"{Colors.GREEN}History & Cache Cleared (24h){Colors.RESET}")
    else:
        print(f"{Colors.RED}Clearing browsing data failed.{Colors.RESET}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and edit the start page.")
    parser.add_argument("--data", type=Path, default=None, help="start page data file (mozlz4)")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    data_path = args.data or default_data_path()
    store = TreeStore(Mozlz4Storage(data_path))
    print_header(data_path)

    actions = {
        "1": show,
        "2": add_page,
        "3": rename,
        "4": delete,
        "5": move,
        "6": reorder,
        "7": merge,
        "8": toggle,
        "9": export,
    }

    while True:
        print_menu()

        choice = input("Select option: ").strip()

        try:
            if choice in actions:
                actions[choice](store)
            elif choice == "10":
                clear_data()
            elif choice == "0" or choice.lower() == "q":
                print("\nBye!")
                sys.exit(0)
            else:
                print(f"\n{Colors.RED}Invalid option.{Colors.RESET}")
        except DashboardError as e:
            print(f"\n{Colors.RED}Error:{Colors.RESET} {e}")
        except OSError as e:
            print(f"\n{Colors.RED}Unexpected error:{Colors.RESET} {e}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(0)
