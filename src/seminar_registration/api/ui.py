"""Minimal registration page that consumes the registration API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def registration_page() -> HTMLResponse:
    """Serve the registration form."""
    return HTMLResponse(_REGISTRATION_UI_HTML)


_REGISTRATION_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Seminar Registration</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 0.8rem; }
      input, select, textarea { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .error-message { color: #c62828; font-size: 0.9rem; }
      .response-message { display: none; padding: 0.8rem; margin: 1rem 0; }
      .response-message.success { display: block; background: #e8f5e9; }
      .response-message.error { display: block; background: #ffebee; }
      img { max-width: 320px; border-radius: 10px; }
    </style>
  </head>
  <body>
    <h1>Seminar Registration</h1>
    <div id="responseMessage" class="response-message"></div>
    <div class="row">
      <img id="preview" alt="Live camera" />
      <div>
        <button id="start_camera" onclick="act('/camera/start')">Start camera</button>
        <button id="stop_camera" onclick="act('/camera/stop')">Stop camera</button>
        <button id="capture_photo" onclick="act('/camera/capture')">Capture</button>
      </div>
    </div>
    <div class="row" id="currentPhoto"><p>No photo taken yet</p></div>
    <form id="registrationForm" onsubmit="submitForm(event)">
      <div class="row"><input name="full_name" placeholder="Full name" />
        <div class="error-message" data-for="full_name"></div></div>
      <div class="row"><input name="email" placeholder="Email" />
        <div class="error-message" data-for="email"></div></div>
      <div class="row"><input name="phone" placeholder="Phone" />
        <div class="error-message" data-for="phone"></div></div>
      <div class="row"><input name="company" placeholder="Company" /></div>
      <div class="row"><input name="position" placeholder="Position" /></div>
      <div class="row">
        <select name="seminar_topic">
          <option value="">Select seminar topic</option>
          <option value="AI">AI</option>
          <option value="Cloud">Cloud</option>
          <option value="Security">Security</option>
        </select>
        <div class="error-message" data-for="seminar_topic"></div>
      </div>
      <div class="row">
        <select name="dietary_requirements">
          <option value="">No dietary requirements</option>
          <option value="Vegetarian">Vegetarian</option>
          <option value="Vegan">Vegan</option>
          <option value="Halal">Halal</option>
        </select>
      </div>
      <div class="row"><textarea name="comments" placeholder="Comments"></textarea></div>
      <button id="submit" type="submit">Register</button>
      <button type="button" onclick="act('/registration/reset')">Reset</button>
    </form>
    <script>
      let previewTimer = null;

      async function act(path, body) {
        const options = { method: 'POST' };
        if (body) {
          options.headers = { 'Content-Type': 'application/json' };
          options.body = JSON.stringify(body);
        }
        render(await (await fetch(path, options)).json());
      }

      function submitForm(event) {
        event.preventDefault();
        const data = Object.fromEntries(new FormData(event.target).entries());
        document.getElementById('submit').disabled = true;
        act('/registration', data);
      }

      function render(view) {
        document.getElementById('start_camera').disabled = !view.buttons.start;
        document.getElementById('stop_camera').disabled = !view.buttons.stop;
        document.getElementById('capture_photo').disabled = !view.buttons.capture;
        const submit = document.getElementById('submit');
        submit.disabled = !view.buttons.submit;
        submit.textContent = view.buttons.submit_label;
        const banner = document.getElementById('responseMessage');
        banner.textContent = view.banner.message;
        banner.className = 'response-message ' + (view.banner.variant || '');
        document.querySelectorAll('.error-message').forEach(el => {
          el.textContent = view.field_errors[el.dataset.for] || '';
        });
        const form = document.getElementById('registrationForm');
        for (const [name, value] of Object.entries(view.form)) {
          form.elements[name].value = value;
        }
        document.getElementById('currentPhoto').innerHTML = view.photo
          ? '<img src="' + view.photo + '" alt="Profile Photo" />'
          : '<p>No photo taken yet</p>';
        if (view.buttons.stop && !previewTimer) {
          previewTimer = setInterval(refreshPreview, 500);
        } else if (!view.buttons.stop && previewTimer) {
          clearInterval(previewTimer);
          previewTimer = null;
          document.getElementById('preview').removeAttribute('src');
        }
      }

      async function refreshPreview() {
        const res = await fetch('/camera/preview');
        if (res.ok) {
          document.getElementById('preview').src = (await res.json()).frame;
        }
      }

      fetch('/registration').then(res => res.json()).then(render);
    </script>
  </body>
</html>
"""
