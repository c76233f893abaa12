# cli.py
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pycatalog import CatalogAPIError, CatalogClient

console = Console()
c = CatalogClient(
    base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:3000"),
    api_key=os.getenv("CATALOG_API_KEY", "dev-api-key"),
)

# Known ids/categories, refreshed whenever a list comes back
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, header_style="bold cyan", title_style="bold magenta", show_lines=True)
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=36)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=14)
    table.add_column("In stock", justify="center", width=8)

    for p in products:
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"${p.get('price', 0):.2f}",
            p.get("category", "N/A"),
            "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]",
        )
    console.print(table)


def show_pagination(pagination: Dict[str, Any]):
    console.print(
        f"[dim]page {pagination.get('currentPage')} of {pagination.get('totalPages')} "
        f"· {pagination.get('totalProducts')} matching"
        f"{' · next ▶' if pagination.get('hasNext') else ''}"
        f"{' · ◀ prev' if pagination.get('hasPrev') else ''}[/dim]"
    )


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Call fn with a spinner. Returns its result, or None after printing the
    error when the API (or the connection) fails.
    """
    try:
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), transient=True) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)
    except CatalogAPIError as e:
        msg = f"Error: {e}"
        if e.details:
            msg += "\n" + "\n".join(f"• {d}" for d in e.details)
        console.print(show_status(msg, False))
        return None
    except OSError as e:
        console.print(show_status(f"Connection error: {e}", False))
        return None

    if success_msg:
        console.print(show_status(success_msg, True))
    return result


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_cache():
    global product_cache
    page = try_api(c.list_products, limit=1000)
    if page is not None:
        product_cache = page.get("products", [])


def id_completer():
    return WordCompleter([p["id"] for p in product_cache if p.get("id")], ignore_case=True)


def category_completer():
    return WordCompleter(sorted({p["category"] for p in product_cache if p.get("category")}), ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Name", default=current.get("name", "")),
        "description": prompt_with_autocomplete("Description", default=current.get("description", "")),
        "price": ask_float("💰 Price", default=current.get("price", 10.0)),
        "category": prompt_with_autocomplete("🏷️ Category", completer=category_completer(), default=current.get("category", "")),
        "in_stock": Confirm.ask("In stock?", default=current.get("inStock", True)),
    }


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)
    header.add_row(
        "🛍️ Catalog",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}[/dim]",
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    console.clear()
    console.print(create_header())
    refresh_cache()

    options = [
        ("1", "📦 List products"),
        ("2", "🔍 Filter / search / page"),
        ("3", "ℹ️ Get product by ID"),
        ("4", "➕ Create product"),
        ("5", "✏️ Update product"),
        ("6", "🗑️ Delete product"),
        ("q", "👋 Quit"),
    ]

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in options:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option", completer=WordCompleter([k for k, _ in options] + ["quit", "exit"])
        ).strip()

        if choice == "1":
            page = try_api(c.list_products)
            if page is not None:
                show_products(page["products"])
                show_pagination(page["pagination"])

        elif choice == "2":
            category = prompt_with_autocomplete("Category (blank for all)", completer=category_completer()).strip()
            search = prompt_with_autocomplete("Name contains (blank for all)").strip()
            page_num = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Per page", default=10)
            page = try_api(c.list_products, category or None, search or None, page_num, limit)
            if page is not None:
                show_products(page["products"])
                show_pagination(page["pagination"])

        elif choice == "3":
            pid = prompt_with_autocomplete("Product ID", completer=id_completer()).strip()
            resp = try_api(c.get_product, pid)
            if resp:
                show_products([resp], title="ℹ️ Product")

        elif choice == "4":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                show_products([resp], title="➕ Created")
                refresh_cache()

        elif choice == "5":
            pid = prompt_with_autocomplete("Product ID", completer=id_completer()).strip()
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp], title="✏️ Updated")
                    refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Product ID", completer=id_completer()).strip()
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    show_products([resp], title="🗑️ Deleted")
                    refresh_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
            sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
