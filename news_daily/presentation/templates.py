"""HTML模板模块"""

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="zh-CN">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>📰 AI 资讯日报 - 首页</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background: #f5f5f5; line-height: 1.6; }
        .container { max-width: 900px; margin: 0 auto; padding: 40px 20px; }
        header { text-align: center; padding: 60px 20px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; border-radius: 16px; margin-bottom: 40px; }
        header h1 { font-size: 3em; margin-bottom: 15px; }
        header p { font-size: 1.2em; opacity: 0.9; }
        .latest { background: white; border-radius: 12px; padding: 30px; margin-bottom: 30px; box-shadow: 0 4px 15px rgba(0,0,0,0.1); }
        .latest h2 { color: #667eea; margin-bottom: 20px; }
        .latest a { display: block; padding: 20px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; text-decoration: none; border-radius: 10px; font-size: 1.3em; transition: transform 0.2s; }
        .latest a:hover { transform: scale(1.02); }
        .latest .empty { color: #888; }
        .archive h2 { color: #333; margin-bottom: 20px; }
        .archive-list { display: grid; gap: 15px; }
        .archive-item { background: white; padding: 20px; border-radius: 10px; display: flex; justify-content: space-between; align-items: center; box-shadow: 0 2px 8px rgba(0,0,0,0.08); }
        .archive-item a { color: #667eea; text-decoration: none; font-weight: 500; }
        .archive-item a:hover { text-decoration: underline; }
        .archive-item span { color: #888; }
    </style>
</head>
<body>
    <div class="container">
        <header>
            <h1>📰 AI 资讯日报</h1>
            <p>每日精选高质量 AI 资讯 | 核心洞察 + 论文 + 开源 + 工具</p>
        </header>

        <div class="latest">
            <h2>📢 最新日报</h2>
            {LATEST_HTML}
        </div>

        <div class="archive">
            <h2>📁 历史归档（{ARCHIVE_COUNT} 期）</h2>
            <div class="archive-list">
{ARCHIVE_HTML}            </div>
        </div>
    </div>
</body>
</html>
"""

LATEST_HTML = '<a href="{HREF}">📰 {LABEL} - 点击查看今日 AI 资讯</a>'

EMPTY_LATEST_HTML = '<p class="empty">暂无日报</p>'

ARCHIVE_ITEM_HTML = """                <div class="archive-item">
                    <a href="{HREF}">📰 {LABEL}</a>
                    <span>🌟 核心洞察 + X截图</span>
                </div>
"""
