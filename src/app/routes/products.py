"""
Products Routes: 상품 CRUD 화면 (백엔드 /api/products 프록시).

- GET    /products            → 목록 (백엔드 /api/products/lihat)
- GET    /products/create     → 생성 폼
- POST   /products            → 생성 (multipart, image 선택)
- GET    /products/{id}       → 상세
- GET    /products/{id}/edit  → 수정 폼
- PUT    /products/{id}       → 수정 (JSON)
- DELETE /products/{id}       → 삭제

업로드 이미지는 임시 파일로 스테이징 후 스트림 전송,
호출 결과와 무관하게 staged_upload 종료 시 삭제.
"""

import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, Response

from src.app.routes.common import (
    get_backend,
    get_staging_dir,
    redirect_to,
    render,
    server_error,
)
from src.core.uploads import staged_upload
from src.domain.errors import ProxyError
from src.domain.schemas import Product, ProductForm, parse_collection, parse_item

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/products"


@router.get("", response_class=HTMLResponse)
async def list_products(request: Request) -> Response:
    """상품 목록."""
    try:
        data = await get_backend(request).list_products()
        products = parse_collection(data, Product)
    except ProxyError as e:
        logger.error(f"Error fetching products: {e}")
        return server_error("Error fetching products")

    return render(request, "products/list.html", {"products": products})


@router.get("/create", response_class=HTMLResponse)
async def create_product_page(request: Request) -> Response:
    """상품 생성 폼."""
    return render(request, "products/create.html")


@router.post("")
async def create_product(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    price: str = Form(""),
    stock: str = Form(""),
    image: UploadFile | None = File(None),
) -> Response:
    """상품 생성 (이미지 첨부 시 multipart 재구성)."""
    form = ProductForm(name=name, description=description, price=price, stock=stock)
    try:
        async with staged_upload(image, get_staging_dir(request)) as staged:
            await get_backend(request).create_product(form.to_payload(), staged)
    except ProxyError as e:
        logger.error(f"Error creating product: {e}")
        return server_error("Error creating product")
    except OSError as e:
        logger.error(f"Error staging product image: {e}")
        return server_error("Error creating product")

    return redirect_to(LIST_URL)


@router.get("/{product_id}", response_class=HTMLResponse)
async def show_product(request: Request, product_id: str) -> Response:
    """상품 상세."""
    try:
        product = parse_item(await get_backend(request).get_product(product_id), Product)
    except ProxyError as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        return server_error("Error fetching product")

    return render(request, "products/show.html", {"product": product})


@router.get("/{product_id}/edit", response_class=HTMLResponse)
async def edit_product_page(request: Request, product_id: str) -> Response:
    """상품 수정 폼 (현재 값으로 채움)."""
    try:
        product = parse_item(await get_backend(request).get_product(product_id), Product)
    except ProxyError as e:
        logger.error(f"Error fetching product {product_id} for edit: {e}")
        return server_error("Error fetching product")

    return render(request, "products/edit.html", {"product": product})


@router.put("/{product_id}")
async def update_product(
    request: Request,
    product_id: str,
    name: str = Form(""),
    description: str = Form(""),
    price: str = Form(""),
    stock: str = Form(""),
) -> Response:
    """상품 수정."""
    form = ProductForm(name=name, description=description, price=price, stock=stock)
    try:
        await get_backend(request).update_product(product_id, form.to_payload())
    except ProxyError as e:
        logger.error(f"Error updating product {product_id}: {e}")
        return server_error("Error updating product")

    return redirect_to(LIST_URL)


@router.delete("/{product_id}")
async def delete_product(request: Request, product_id: str) -> Response:
    """상품 삭제."""
    try:
        await get_backend(request).delete_product(product_id)
    except ProxyError as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        return server_error("Error deleting product")

    return redirect_to(LIST_URL)
