"""Landing Page - the public marketing page served at the site root.

Invariants:
    - Static markup only: no database access, no per-request state
    - Links to the invoice dashboard (the collection view)
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["landing"])

LANDING_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>Acme</title>
  </head>
  <body>
    <main>
      <header><h1>Acme</h1></header>
      <section>
        <p><strong>Welcome to Acme.</strong> Create, edit and track invoices
        for your customers in one place.</p>
        <a href="/dashboard/invoices">Log in</a>
      </section>
    </main>
  </body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page():
    return LANDING_HTML
