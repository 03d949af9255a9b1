from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from inventory_service.templating import templates

router = APIRouter()


@router.get("/RegisterForm.html", response_class=HTMLResponse)
def register_form(request: Request):
    return templates.TemplateResponse(request, "RegisterForm.html", {"title": "Register item"})


@router.get("/SearchForm.html", response_class=HTMLResponse)
def search_form(request: Request):
    return templates.TemplateResponse(request, "SearchForm.html", {"title": "Search item"})
