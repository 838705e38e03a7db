"""
BragaWork - Uploads API
Upload e listagem das imagens dos projetos
"""
import logging
import os
import random
import re
import time
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, UploadFile, File

from bragawork.core import Session, settings
from bragawork.api.auth import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])

ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"}
IMAGE_EXTENSIONS_RE = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)
PUBLIC_PREFIX = "/uploads/projects"
CHUNK_SIZE = 64 * 1024


def get_projects_upload_dir() -> str:
    return os.path.join(settings.UPLOADS_DIR, "projects")


def make_upload_filename(original: Optional[str]) -> str:
    """<timestamp ms>-<aleatório>-<nome original sanitizado>"""
    safe_name = re.sub(r"[^a-zA-Z0-9.-]", "_", original or "imagem")
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{unique_suffix}-{safe_name}"


async def read_limited(file: UploadFile, limit: int) -> Optional[bytes]:
    """Lê o arquivo; None se passar do limite"""
    contents = bytearray()
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        contents.extend(chunk)
        if len(contents) > limit:
            return None
    return bytes(contents)


@router.post("/upload-image")
async def upload_image(
    image: Optional[UploadFile] = File(None),
    admin: Session = Depends(get_current_admin)
):
    """Recebe uma imagem (campo "image") e devolve a URL pública"""
    try:
        if image is None or not image.filename:
            return {"success": False, "message": "Nenhum arquivo foi enviado."}

        if image.content_type not in ALLOWED_MIME_TYPES:
            return {"success": False, "message": "Tipo de arquivo não permitido. Use JPG, PNG, WEBP ou GIF."}

        contents = await read_limited(image, settings.MAX_UPLOAD_SIZE)
        if contents is None:
            max_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
            return {"success": False, "message": f"Arquivo muito grande. Tamanho máximo: {max_mb}MB."}

        upload_dir = get_projects_upload_dir()
        os.makedirs(upload_dir, exist_ok=True)

        filename = make_upload_filename(image.filename)
        with open(os.path.join(upload_dir, filename), "wb") as f:
            f.write(contents)

        logger.info(f"Imagem enviada por {admin.username}: {filename}")

        return {
            "success": True,
            "message": "Imagem enviada com sucesso!",
            "imageUrl": f"{PUBLIC_PREFIX}/{filename}",
            "filename": filename
        }
    except Exception as e:
        logger.error(f"Erro ao fazer upload: {e}")
        return {"success": False, "message": "Erro ao fazer upload da imagem."}
    finally:
        if image is not None:
            await image.close()


@router.get("/list-images")
async def list_images(admin: Session = Depends(get_current_admin)):
    """Imagens já enviadas, mais recentes primeiro"""
    try:
        upload_dir = get_projects_upload_dir()
        if not os.path.isdir(upload_dir):
            return {"success": True, "images": []}

        found = []
        for filename in os.listdir(upload_dir):
            if not IMAGE_EXTENSIONS_RE.search(filename):
                continue
            mtime = os.stat(os.path.join(upload_dir, filename)).st_mtime
            found.append((mtime, filename))

        found.sort(reverse=True)
        images = [
            {
                "filename": filename,
                "url": f"{PUBLIC_PREFIX}/{filename}",
                "uploadDate": datetime.fromtimestamp(mtime).isoformat(),
            }
            for mtime, filename in found
        ]
        return {"success": True, "images": images}
    except Exception as e:
        logger.error(f"Erro ao listar imagens: {e}")
        return {"success": False, "message": "Erro ao listar imagens.", "images": []}
