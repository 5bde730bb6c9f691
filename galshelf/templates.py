INDEX_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>{{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    .card { border: 1px solid rgba(255,255,255,.08); }
    .game-cover { width: 100%; height: 260px; object-fit: cover; border-radius: .5rem .5rem 0 0; background:#222; }
    .title { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
    .path { color: rgba(255,255,255,.6); word-break: break-all; }
  </style>
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('galshelf.index') }}">{{ app_title }}</a>
  <div class="ms-auto d-flex gap-2">
    <a class="btn btn-outline-light btn-sm" href="{{ url_for('galshelf.index') }}">Rescan</a>
  </div>
</nav>

<div class="container py-4">
  {% with messages = get_flashed_messages() %}
    {% if messages %}
      <div class="alert alert-warning">{{ messages|join('. ') }}</div>
    {% endif %}
  {% endwith %}

  <form class="card p-3 mb-4" action="{{ url_for('galshelf.settings_post') }}" method="post">
    <label class="form-label">Library folders (one per line; each subfolder is one game)</label>
    <textarea class="form-control font-monospace" name="library_roots" rows="3">{{ roots|join('\n') }}</textarea>
    <div class="mt-2"><button class="btn btn-primary btn-sm" type="submit">Save</button></div>
  </form>

  {% if not games %}
    <div class="text-center py-5">
      <h4>No games detected.</h4>
      <p class="text-secondary">Add a library folder. Each game folder needs its .exe within two levels (e.g. <code>chs/game.exe</code>).</p>
    </div>
  {% else %}
  <div class="row row-cols-1 row-cols-sm-2 row-cols-md-3 row-cols-xl-5 g-4">
    {% for g in games %}
      <div class="col">
        <div class="card h-100 shadow-sm">
          <img class="game-cover" src="{{ url_for('galshelf.cover', path=g.install_path, title=g.title) }}" alt="cover">
          <div class="card-body d-flex flex-column">
            <div class="title fw-semibold" title="{{ g.title }}">
              {{ g.title }}
              {% if running_ids and g.id in running_ids %}
                <span class="badge text-bg-warning ms-2">Running</span>
              {% endif %}
            </div>
            <div class="small path mt-1">{{ g.exe_path }}</div>
            <div class="mt-2 d-flex flex-wrap gap-2">
              <button class="btn btn-success btn-sm" type="button"
                      data-exe="{{ g.exe_path }}" data-id="{{ g.id }}" onclick="launch(this)">Run</button>
              {% if g.engine %}
                <span class="badge text-bg-info align-self-center">{{ g.engine }}</span>
              {% endif %}
            </div>
          </div>
        </div>
      </div>
    {% endfor %}
  </div>
  {% endif %}
</div>
<script>
async function launch(btn) {
  const res = await fetch("{{ url_for('galshelf.api_launch') }}", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({exe_path: btn.dataset.exe, game_id: btn.dataset.id}),
  });
  const body = await res.json();
  if (!body.ok) alert("Launch failed: " + body.error);
}
</script>
</body>
</html>
"""
