"""
Static home page describing the API.
"""

HOME_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Edge Request Router (Groq)</title>
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
        .container { background: #f5f5f5; padding: 20px; border-radius: 8px; }
        .endpoint { margin: 20px 0; padding: 15px; background: white; border-radius: 5px; }
        .method { display: inline-block; padding: 3px 8px; border-radius: 3px; color: white; font-weight: bold; }
        .post { background: #28a745; }
        .get { background: #007bff; }
        code { background: #f8f9fa; padding: 2px 4px; border-radius: 3px; }
        .groq-badge { background: #FF6B35; color: white; padding: 5px 10px; border-radius: 15px; font-size: 12px; display: inline-block; margin-left: 10px; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Edge Request Router <span class="groq-badge">Powered by Groq</span></h1>
        <p>Chat, translation and summarization on Groq's inference API.</p>

        <h2>Endpoints</h2>

        <div class="endpoint">
            <h3><span class="method post">POST</span> /api/chat</h3>
            <p>Chat with a Groq model.</p>
            <p><strong>Body:</strong> <code>{"message": "Hello", "model": "llama3-8b-8192"}</code></p>
        </div>

        <div class="endpoint">
            <h3><span class="method post">POST</span> /api/translate</h3>
            <p>Translate text.</p>
            <p><strong>Body:</strong> <code>{"text": "Hello", "from": "English", "to": "Chinese"}</code></p>
        </div>

        <div class="endpoint">
            <h3><span class="method post">POST</span> /api/summarize</h3>
            <p>Summarize text.</p>
            <p><strong>Body:</strong> <code>{"text": "A long passage to summarize..."}</code></p>
        </div>

        <div class="endpoint">
            <h3><span class="method get">GET</span> /api/models</h3>
            <p>List the available Groq models.</p>
        </div>

        <h2>Notes</h2>
        <ul>
            <li>Responses include token usage reported by Groq.</li>
            <li>CORS is open to every origin.</li>
        </ul>
    </div>
</body>
</html>
"""
