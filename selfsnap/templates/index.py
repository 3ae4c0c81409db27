def get_html_template() -> str:
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0, user-scalable=no">
        <title>SelfSnap Photobooth</title>
        <style>
            body { font-family: sans-serif; background: #111827; color: #fff; margin: 0; padding: 16px; }
            .row { display: flex; gap: 16px; flex-wrap: wrap; }
            video, canvas { background: #000; max-width: 100%; }
            .frames img { height: 80px; cursor: pointer; border: 2px solid transparent; }
            .frames img.active { border-color: #f59e0b; }
            button { font-size: 1.1rem; padding: 8px 16px; margin: 4px; }
        </style>
    </head>
    <body>
        <div class="status" id="status">SelfSnap Ready!</div>
        <div class="frames" id="frames"></div>
        <div>
            <button onclick="selectFilter('none')">Normal</button>
            <button onclick="selectFilter('bw')">B&amp;W</button>
            <button onclick="selectFilter('sepia')">Sepia</button>
        </div>
        <div class="row">
            <video id="video" autoplay playsinline width="480"></video>
            <canvas id="grid" width="400" height="600"></canvas>
        </div>
        <button onclick="startSession()">Start</button>
        <button onclick="takeShot()">📸 Shot</button>
        <button onclick="finish()">Finish</button>
        <div id="result"></div>

        <script>
            let filters = {};
            let selectedFilter = 'none';
            let selectedFrame = null;
            let slots = [];
            let shotCount = 0;

            const setStatus = (text) => document.getElementById('status').textContent = text;

            async function api(path, options = {}) {
                const resp = await fetch(path, {
                    headers: { 'Content-Type': 'application/json' },
                    ...options
                });
                const data = await resp.json();
                if (!resp.ok) throw new Error(data.detail || resp.statusText);
                return data;
            }

            async function init() {
                filters = await api('/api/filters');
                const grid = document.getElementById('grid');
                slots = (await api('/api/layout/slots', {
                    method: 'POST',
                    body: JSON.stringify({ canvasW: grid.width, canvasH: grid.height })
                })).slots;
                drawSlots();

                const { frames } = await api('/api/frames/');
                const container = document.getElementById('frames');
                frames.forEach((frame) => {
                    const img = document.createElement('img');
                    img.src = frame.url;
                    img.title = frame.name || frame.s3Key;
                    img.onclick = () => {
                        selectedFrame = frame.s3Key;
                        container.querySelectorAll('img').forEach((el) => el.classList.remove('active'));
                        img.classList.add('active');
                    };
                    container.appendChild(img);
                });

                const stream = await navigator.mediaDevices.getUserMedia({ video: true });
                document.getElementById('video').srcObject = stream;
            }

            function drawSlots() {
                const ctx = document.getElementById('grid').getContext('2d');
                ctx.fillStyle = '#fff';
                ctx.fillRect(0, 0, ctx.canvas.width, ctx.canvas.height);
                ctx.strokeStyle = '#9ca3af';
                slots.forEach((s) => ctx.strokeRect(s.x, s.y, s.w, s.h));
            }

            function selectFilter(mode) {
                selectedFilter = mode;
                document.getElementById('video').style.filter = filters[mode];
            }

            async function startSession() {
                await api('/api/session/create', {
                    method: 'POST',
                    body: JSON.stringify({ filter: selectedFilter, frame_key: selectedFrame })
                });
                shotCount = 0;
                drawSlots();
                setStatus('Session started: take 4 shots');
            }

            async function takeShot() {
                const video = document.getElementById('video');
                const snap = document.createElement('canvas');
                snap.width = video.videoWidth;
                snap.height = video.videoHeight;
                snap.getContext('2d').drawImage(video, 0, 0);
                const photo = snap.toDataURL('image/jpeg', 0.92).split(',')[1];

                const slot = slots[shotCount];
                const ctx = document.getElementById('grid').getContext('2d');
                ctx.filter = filters[selectedFilter];
                ctx.drawImage(snap, slot.x, slot.y, slot.w, slot.h);
                ctx.filter = 'none';

                try {
                    const data = await api('/api/session/shot', { method: 'POST', body: JSON.stringify({ photo }) });
                    shotCount = data.shot_count;
                    setStatus(`Shot ${data.shot_count} of ${data.shots_needed}`);
                } catch (err) {
                    setStatus(err.message);
                }
            }

            async function finish() {
                try {
                    const data = await api('/api/session/finalize', { method: 'POST' });
                    document.getElementById('result').innerHTML =
                        `<a href="${data.download_url}"><img src="data:image/jpeg;base64,${data.collage}" width="300"></a>`;
                    setStatus('Collage ready!');
                } catch (err) {
                    setStatus(err.message);
                }
            }

            init().catch((err) => setStatus(err.message));
        </script>
    </body>
    </html>
    """
