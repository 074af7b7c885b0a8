# generate_secret.py
# Écrit une clé JWT_SECRET_KEY aléatoire dans le fichier .env (sans écraser une clé existante, sauf --force).

import argparse
import os
import secrets

SECRET_KEY_NAME = "JWT_SECRET_KEY"
ANCHOR_COMMENT = "# Auth"


def generate_secret_key(bits: int = 512) -> str:
    return secrets.token_hex(bits // 8)


def read_lines(path: str) -> list[str]:
    if not os.path.exists(path):
        return []
    with open(path, "r") as f:
        return f.readlines()


def has_key(lines: list[str], key: str) -> bool:
    return any(line.strip().startswith(f"{key}=") and line.strip() != f"{key}=" for line in lines)


def set_key(lines: list[str], key: str, value: str, anchor: str) -> list[str]:
    """Remplace `key=...` s'il existe, sinon l'insère après `anchor` (ou l'ajoute en fin de fichier)."""
    entry = f"{key}={value}\n"
    without_key = [line for line in lines if not line.strip().startswith(f"{key}=")]

    for i, line in enumerate(without_key):
        if line.strip() == anchor:
            return without_key[: i + 1] + [entry] + without_key[i + 1:]

    return without_key + [f"\n{anchor}\n", entry]


def main() -> None:
    parser = argparse.ArgumentParser(description=f"Génère {SECRET_KEY_NAME} dans un fichier .env")
    parser.add_argument("--env-path", default=".env")
    parser.add_argument("--bits", type=int, default=512)
    parser.add_argument("--force", action="store_true", help="Remplace une clé existante")
    args = parser.parse_args()

    lines = read_lines(args.env_path)
    if has_key(lines, SECRET_KEY_NAME) and not args.force:
        print(f"🔐 Clé {SECRET_KEY_NAME} déjà définie dans {args.env_path}. Aucune modification.")
        return

    with open(args.env_path, "w") as f:
        f.writelines(set_key(lines, SECRET_KEY_NAME, generate_secret_key(args.bits), ANCHOR_COMMENT))
    print(f"✅ Clé {SECRET_KEY_NAME} écrite dans {args.env_path}.")


if __name__ == "__main__":
    main()
