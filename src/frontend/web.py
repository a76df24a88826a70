from __future__ import annotations
import argparse
import threading
from flask import Flask, request, jsonify, Response
from fuzzy_pinyin.engine import Engine
from fuzzy_pinyin.config import TOP_K
from fuzzy_pinyin.tables.double_pinyin import SCHEMES

app = Flask(__name__)
_engine: Engine | None = None
# the engine's history cache is mutated per keystroke: one query at a time
_lock = threading.Lock()

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    if k < 1:
        return jsonify({"error": "k must be at least 1"}), 400
    if _engine is None:
        return jsonify({"error": "engine not initialized"}), 503
    with _lock:
        rows = _engine.complete(q, top_k=k)
    return jsonify({"query": q, "results": [r.to_dict() for r in rows]})

@app.get("/api/health")
def api_health():
    ready = _engine is not None and _engine.index is not None
    items = len(_engine.index.items) if ready else 0  # type: ignore[union-attr]
    return jsonify({"ok": ready, "items": items})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Fuzzy Pinyin • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
  --mark-bg:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
html,body{height:100%}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap; }
.input{ position:relative; flex:1; min-width:240px; }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.meta{
  display:flex; justify-content:space-between; align-items:center; color:var(--muted);
  font-size:13px; margin-top:6px;
}
.results{ margin-top:16px; overflow:clip; border-radius:12px; border:1px solid var(--border); }
.row{
  display:grid; grid-template-columns:3rem 6rem 1fr; gap:10px; align-items:start;
  padding:12px 14px; border-top:1px solid var(--border);
}
.row:first-child{ border-top:none }
.row:hover{ background:#0d131a }
.head{ background:#0d131a; font-weight:600; color:var(--muted) }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.mark{ background:var(--mark-bg); border-bottom:1px solid var(--accent-2) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", monospace }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fuzzy Pinyin Search</h1>
      <div class="controls">
        <div class="input">
          <input id="q" type="text" placeholder="zw, zhongwen, zhongw…" autocomplete="off" autofocus />
        </div>
      </div>
      <div class="meta"><div id="stats">Ready.</div><div>Esc clears.</div></div>
      <div class="results">
        <div class="row head"><div>#</div><div>Score</div><div>Item</div></div>
        <div id="out" class="empty">Start typing to see results.</div>
      </div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), stats = $("#stats");

function esc(s){ return String(s).replace(/[&<>"']/g, (c)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;","'":"&#39;"}[c])); }
// ranges are inclusive [start, end] character spans from the engine
function highlight(text, ranges){
  if(!ranges || !ranges.length) return esc(text);
  const chars = Array.from(text);
  let html = "", pos = 0;
  for(const [s, e] of ranges){
    html += esc(chars.slice(pos, s).join(""));
    html += `<span class="mark">${esc(chars.slice(s, e + 1).join(""))}</span>`;
    pos = e + 1;
  }
  return html + esc(chars.slice(pos).join(""));
}

async function search(){
  const query = q.value;
  const resp = await fetch(`/api/suggest?q=${encodeURIComponent(query)}&k=50`);
  if(!resp.ok){ stats.textContent = `Error: HTTP ${resp.status}`; return; }
  const data = await resp.json();
  if(data.query !== q.value) return;   // a newer keystroke is already in flight
  const rows = data.results || [];
  stats.textContent = `Results: ${rows.length}`;
  if(!rows.length){ out.className = "empty"; out.innerHTML = "No matches."; return; }
  out.className = "";
  out.innerHTML = rows.map((r, i) => {
    const text = r.field === "path" ? r.path : r.name;
    const score = r.score === null ? "max" : r.score.toFixed(2);
    return `<div class="row"><div class="small">${i+1}</div><div class="small mono">${score}</div><div>${highlight(text, r.ranges)}</div></div>`;
  }).join("");
}

q.addEventListener("input", search);
window.addEventListener("keydown", (ev)=>{
  if(ev.key === "Escape"){ q.value = ""; search(); }
});
search();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--roots", nargs="+")
    src.add_argument("--names", nargs="+")
    ap.add_argument("--folders", action="store_true")
    ap.add_argument("--scheme", choices=sorted(SCHEMES), default=None)
    ap.add_argument("--path-search", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        if args.roots:
            _engine.build_files(args.roots, folders=args.folders, scheme=args.scheme,
                                path_search=args.path_search, verbose=args.verbose)
        else:
            _engine.build_names(args.names, scheme=args.scheme, verbose=args.verbose)
    except (ValueError, FileNotFoundError) as e:
        ap.error(str(e))

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
