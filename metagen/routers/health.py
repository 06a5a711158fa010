from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from metagen.config import Settings, get_settings
from metagen.models.response import HealthResponse

router = APIRouter()

_FORM_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Meta Title Generator</title>
</head>
<body>
  <h1>Meta Title Generator</h1>
  <form id="form">
    <label>Website URL <input id="url" placeholder="https://example.com" required></label>
    <label>Keywords <input id="keywords" placeholder="seo, meta tags" required></label>
    <label>Variants <input id="count" type="number" min="1" max="5" value="1"></label>
    <button type="submit">Generate</button>
  </form>
  <pre id="result"></pre>
  <script>
    document.getElementById("form").addEventListener("submit", async (event) => {
      event.preventDefault();
      const response = await fetch("/generate-meta", {
        method: "POST",
        headers: {"Content-Type": "application/json"},
        body: JSON.stringify({
          url: document.getElementById("url").value,
          keywords: document.getElementById("keywords").value,
          variantCount: Number(document.getElementById("count").value),
        }),
      });
      document.getElementById("result").textContent =
        JSON.stringify(await response.json(), null, 2);
    });
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, summary="Meta generator form")
async def index() -> HTMLResponse:
    return HTMLResponse(_FORM_HTML)


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="Server is running",
        environment=settings.environment,
        api_configured=settings.ai_enabled,
    )
