"""
BragaWork - CLI Admin
Ferramenta de linha de comando para o painel administrativo

Uso:
    bragawork-admin login
    bragawork-admin logout
    bragawork-admin quotes list
    bragawork-admin quotes status <id> <status> [notas]
    bragawork-admin quotes delete <id>
    bragawork-admin projects list
    bragawork-admin images list
    bragawork-admin images upload <arquivo>
"""
import os
import sys
from pathlib import Path
from typing import List, Optional

from bragawork.client import PortalClient, TokenStore

BASE_URL = os.getenv("BRAGAWORK_URL", "http://localhost:5000")
TOKEN_FILE = Path(".admin_token")


def get_client() -> PortalClient:
    return PortalClient(base_url=BASE_URL, token_store=TokenStore(TOKEN_FILE))


def fail(result: dict) -> int:
    print(f"✗ Erro: {result.get('message', 'Falha na requisição')}")
    return 1


def cmd_login(client: PortalClient, username: str = None, password: str = None) -> int:
    """Login no painel"""
    username = username or input("Usuário [admin]: ").strip() or "admin"
    password = password or input("Senha: ").strip()

    result = client.login(username, password)
    if not result.get("success"):
        return fail(result)

    print("\n✓ Login bem sucedido!")
    print(f"  Usuário: {result['user']['username']}")
    return 0


def cmd_logout(client: PortalClient) -> int:
    client.logout()
    print("✓ Sessão encerrada.")
    return 0


def cmd_quotes_list(client: PortalClient) -> int:
    """Lista solicitações de orçamento"""
    quotes = client.get_quotes()
    if isinstance(quotes, dict):
        return fail(quotes)

    print(f"\n{'='*80}")
    print(f"{'ID':<6} | {'Nome':<24} | {'Email':<28} | {'Status':<12}")
    print(f"{'='*80}")
    for q in quotes:
        name = f"{q['firstName']} {q['lastName']}"[:24]
        print(f"{q['id']:<6} | {name:<24} | {q['email'][:28]:<28} | {q['status']:<12}")
    print(f"\nTotal: {len(quotes)} solicitações")
    return 0


def cmd_quotes_status(client: PortalClient, quote_id: str, status: str, notes: Optional[str] = None) -> int:
    result = client.update_quote_status(int(quote_id), status, notes)
    if not result.get("success"):
        return fail(result)
    print(f"✓ {result['message']}")
    return 0


def cmd_quotes_delete(client: PortalClient, quote_id: str) -> int:
    result = client.delete_quote(int(quote_id))
    if not result.get("success"):
        return fail(result)
    print(f"✓ {result['message']}")
    return 0


def cmd_projects_list(client: PortalClient) -> int:
    """Lista todos os projetos (visão admin)"""
    projects = client.get_projects(admin=True)
    if isinstance(projects, dict):
        return fail(projects)

    print(f"\n{'='*70}")
    print(f"{'ID':<6} | {'Ordem':<5} | {'Título':<40} | {'Status':<10}")
    print(f"{'='*70}")
    for p in projects:
        print(f"{p['id']:<6} | {p['displayOrder']:<5} | {p['title'][:40]:<40} | {p['status']:<10}")
    print(f"\nTotal: {len(projects)} projetos")
    return 0


def cmd_images_list(client: PortalClient) -> int:
    result = client.list_images()
    if not result.get("success"):
        return fail(result)
    for img in result["images"]:
        print(f"  {img['uploadDate'][:19]}  {img['url']}")
    print(f"\nTotal: {len(result['images'])} imagens")
    return 0


def cmd_images_upload(client: PortalClient, path: str) -> int:
    result = client.upload_image(path)
    if not result.get("success"):
        return fail(result)
    print(f"✓ Imagem enviada: {result['imageUrl']}")
    return 0


def print_help():
    print(__doc__)


def main(argv: Optional[List[str]] = None, client: Optional[PortalClient] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print_help()
        return 0

    client = client or get_client()
    cmd, rest = args[0].lower(), args[1:]
    sub = rest[0] if rest else None

    if cmd == "login":
        return cmd_login(client, *rest[:2])
    if cmd == "logout":
        return cmd_logout(client)
    if cmd == "quotes":
        if sub == "list":
            return cmd_quotes_list(client)
        if sub == "status" and len(rest) >= 3:
            return cmd_quotes_status(client, *rest[1:4])
        if sub == "delete" and len(rest) >= 2:
            return cmd_quotes_delete(client, rest[1])
        print("Uso: quotes [list|status <id> <status> [notas]|delete <id>]")
        return 2
    if cmd == "projects":
        if sub == "list":
            return cmd_projects_list(client)
        print("Uso: projects list")
        return 2
    if cmd == "images":
        if sub == "list":
            return cmd_images_list(client)
        if sub == "upload" and len(rest) >= 2:
            return cmd_images_upload(client, rest[1])
        print("Uso: images [list|upload <arquivo>]")
        return 2
    if cmd == "help":
        print_help()
        return 0

    print(f"Comando desconhecido: {cmd}")
    print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
