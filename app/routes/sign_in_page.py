"""
Sign-in page route.

Description:
Serves the sign-in form. The page initializes the Firebase web SDK from the
configured web client settings, signs the user in with email and password,
and posts the ID token to /auth/sign-in to obtain a session cookie.

Dependencies:
- fastapi: For defining the route and returning HTML.
- app.core.config: For the Firebase web client configuration.
"""
import json
from html import escape
from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from app.core.config import get_firebase_web_config

router = APIRouter(tags=["pages"])

FIREBASE_SDK_VERSION = "10.12.2"

SIGN_IN_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body style="display:flex;align-items:center;justify-content:center;min-height:100vh;margin:0;font-family:sans-serif">
  <form id="auth-form" style="display:flex;flex-direction:column;gap:12px;min-width:320px">
    <h1>{title}</h1>
    <label>Email <input type="email" name="email" required></label>
    <label>Password <input type="password" name="password" required></label>
    <button type="submit">Sign in</button>
    <p id="auth-message" role="status"></p>
  </form>
  <script type="module">
    import {{ initializeApp, getApps, getApp }} from "https://www.gstatic.com/firebasejs/{sdk_version}/firebase-app.js";
    import {{ getAuth, signInWithEmailAndPassword }} from "https://www.gstatic.com/firebasejs/{sdk_version}/firebase-auth.js";

    const app = getApps().length ? getApp() : initializeApp({firebase_config});
    const auth = getAuth(app);
    const form = document.getElementById("auth-form");
    const message = document.getElementById("auth-message");

    form.addEventListener("submit", async (event) => {{
      event.preventDefault();
      const email = form.email.value;
      try {{
        const credential = await signInWithEmailAndPassword(auth, email, form.password.value);
        const idToken = await credential.user.getIdToken();
        const response = await fetch("/auth/sign-in", {{
          method: "POST",
          headers: {{ "Content-Type": "application/json" }},
          body: JSON.stringify({{ email, idToken }}),
        }});
        const result = await response.json();
        message.textContent = result.message;
        if (result.success) window.location.assign("/");
      }} catch (error) {{
        message.textContent = "Sign in failed. Please check your credentials.";
      }}
    }});
  </script>
</body>
</html>
"""


def render_sign_in_page() -> str:
    firebase_config = json.dumps(get_firebase_web_config()).replace("</", "<\\/")
    return SIGN_IN_PAGE.format(
        title=escape("Sign in"),
        sdk_version=FIREBASE_SDK_VERSION,
        firebase_config=firebase_config
    )


@router.get("/sign-in", response_class=HTMLResponse)
async def sign_in_page():
    return HTMLResponse(content=render_sign_in_page())
