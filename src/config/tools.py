# Category display names and icon ids for the sidebar, in display order
CATEGORY_DEFINITIONS = [
    {"id": "all", "name": "全部工具", "icon": "grid"},
    {"id": "utility", "name": "实用工具", "icon": "tool"},
    {"id": "calculator", "name": "计算器", "icon": "calculator"},
    {"id": "design", "name": "设计工具", "icon": "palette"},
    {"id": "development", "name": "开发工具", "icon": "code"},
    {"id": "games", "name": "游戏娱乐", "icon": "gamepad"},
    {"id": "image", "name": "图像工具", "icon": "image"},
    {"id": "learning", "name": "学习工具", "icon": "book"},
    {"id": "lifestyle", "name": "生活工具", "icon": "heart"},
    {"id": "pdf", "name": "PDF工具", "icon": "file-text"},
    {"id": "productivity", "name": "效率工具", "icon": "zap"},
    {"id": "system", "name": "系统工具", "icon": "settings"},
    {"id": "text", "name": "文本工具", "icon": "type"},
]

# Store for tools configuration
TOOLS = [
    {
        "id": 13,
        "name": "文字计数器",
        "description": "实时统计文本的字数、字符数、段落数、阅读时间等详细信息",
        "category": "utility",
        "tags": ["文字统计", "字数统计", "实用工具"],
        "icon": "文",
        "url": "./tools/text-counter/",
        "is_local": True,
        "is_original": True,
        "popular": True
    },
    {
        "id": 14,
        "name": "颜色选择器",
        "description": "专业的颜色选择和格式转换工具",
        "category": "utility",
        "tags": ["颜色转换", "调色板", "实用工具"],
        "icon": "色",
        "url": "./tools/color-picker/",
        "is_local": True,
        "is_original": True,
        "popular": True
    },
    {
        "id": 15,
        "name": "二维码生成器",
        "description": "生成各种类型的二维码，支持文本、网址、WiFi等，可自定义样式",
        "category": "utility",
        "tags": ["二维码", "生成器", "实用工具"],
        "icon": "码",
        "url": "./tools/qr-generator/",
        "is_local": True,
        "is_original": True,
        "popular": True
    },
    {
        "id": 16,
        "name": "JSON格式化",
        "description": "JSON美化、压缩、验证工具，支持语法高亮和错误检测",
        "category": "utility",
        "tags": ["JSON", "格式化", "实用工具"],
        "icon": "J",
        "url": "./tools/json-formatter/",
        "is_local": True,
        "is_original": True,
        "popular": True
    },
    {
        "id": 202,
        "name": "年龄和生肖计算器",
        "description": "根据出生日期计算年龄并显示对应生肖",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "年",
        "url": "./tools/age-calculate-shengxiao/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 1
    },
    {
        "id": 203,
        "name": "食物热量转换器 - 健康管理工具",
        "description": "食物热量查询和营养成分分析工具",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学", "转换器"],
        "icon": "食",
        "url": "./tools/food-heat-computer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 204,
        "name": "会议成本计算器 - Meeting Cost Calculator",
        "description": "会议成本计算器 - Meeting Cost Calculator",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "会",
        "url": "./tools/meeting-cost/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 205,
        "name": "阅读时间计算器 - Reading Time Calculator",
        "description": "阅读时间计算器 - Reading Time Calculator",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "阅",
        "url": "./tools/reading-time-calculator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 206,
        "name": "058_timezone_converter",
        "description": "058_timezone_converter",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "0",
        "url": "./tools/timezone-converter/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 1
    },
    {
        "id": 207,
        "name": "工作性价比计算器",
        "description": "工作性价比计算器",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "工",
        "url": "./tools/work-worth-calculator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 208,
        "name": "几何图形面积/体积计算器",
        "description": "几何图形面积/体积计算器",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "几",
        "url": "./tools/geometry-calculator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 209,
        "name": "时间差计算器",
        "description": "计算两个时间点之间的时间差",
        "category": "calculator",
        "tags": ["迁移工具", "计算器", "数学"],
        "icon": "时",
        "url": "./tools/time-difference/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 1
    },
    {
        "id": 210,
        "name": "图表生成器",
        "description": "图表生成器",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意", "生成器"],
        "icon": "图",
        "url": "./tools/chart-pie-gen-tool/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 211,
        "name": "极简 Logo 设计器 - Minimalist Logo Designer",
        "description": "极简 Logo 设计器 - Minimalist Logo Designer",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意"],
        "icon": "极",
        "url": "./tools/logo-designer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 212,
        "name": "网页万花筒",
        "description": "网页万花筒",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意"],
        "icon": "网",
        "url": "./tools/web-kaleidoscope/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 213,
        "name": "配色方案生成器 - Color Palette Generator",
        "description": "配色方案生成器 - Color Palette Generator",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意", "生成器"],
        "icon": "配",
        "url": "./tools/color-palette-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 214,
        "name": "数字蒲公英 - Digital Dandelion",
        "description": "数字蒲公英 - Digital Dandelion",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意"],
        "icon": "数",
        "url": "./tools/digital-dandelion/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 216,
        "name": "粒子效果生成器",
        "description": "创建炫酷的粒子动画效果",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意", "生成器"],
        "icon": "粒",
        "url": "./tools/particle-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 218,
        "name": "文件加密工具",
        "description": "本地文件加密和解密工具",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程"],
        "icon": "文",
        "url": "./tools/file-encrypt-util/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 219,
        "name": "AnyRouter | Claude Code 共享平台",
        "description": "AnyRouter | Claude Code 共享平台",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程"],
        "icon": "A",
        "url": "./tools/claude-code-usage-web/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 220,
        "name": "CSS Flexbox 布局生成器",
        "description": "CSS Flexbox 布局生成器",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程", "生成器"],
        "icon": "C",
        "url": "./tools/flexbox-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 221,
        "name": "CSS Grid 布局生成器",
        "description": "CSS Grid 布局生成器",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程", "生成器"],
        "icon": "C",
        "url": "./tools/grid-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 222,
        "name": "文件哈希值计算器",
        "description": "文件哈希值计算器",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程", "计算器"],
        "icon": "文",
        "url": "./tools/file-hash/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 224,
        "name": "CSV/JSON 转换器",
        "description": "CSV/JSON 转换器",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程", "转换器"],
        "icon": "C",
        "url": "./tools/csv-json-converter/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 225,
        "name": "正则表达式测试器",
        "description": "在线正则表达式测试和验证工具",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程"],
        "icon": "正",
        "url": "./tools/regex-tester/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 226,
        "name": "Unix时间戳转换器 - 小苏趣研AI",
        "description": "Unix时间戳转换器 - 小苏趣研AI",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程", "转换器"],
        "icon": "U",
        "url": "./tools/unix-timestamp/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 227,
        "name": "剪贴板历史管理器 - 小苏趣研AI",
        "description": "剪贴板历史管理器 - 小苏趣研AI",
        "category": "development",
        "tags": ["迁移工具", "开发", "编程"],
        "icon": "剪",
        "url": "./tools/clipboard-history/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 228,
        "name": "1024游戏 - 小苏趣研AI",
        "description": "1024游戏 - 小苏趣研AI",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "1",
        "url": "./tools/game-1024/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 229,
        "name": "2048游戏 - 小苏趣研AI",
        "description": "2048游戏 - 小苏趣研AI",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "2",
        "url": "./tools/game-2048/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 230,
        "name": "反应时间测试 - 小苏趣研AI",
        "description": "反应时间测试 - 小苏趣研AI",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "反",
        "url": "./tools/reaction-time-test/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 231,
        "name": "真心话大冒险生成器",
        "description": "真心话大冒险生成器",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐", "生成器"],
        "icon": "真",
        "url": "./tools/truth-or-dare/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 232,
        "name": "数独解谜/生成器",
        "description": "数独解谜/生成器",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐", "生成器"],
        "icon": "数",
        "url": "./tools/sudoku-game/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 233,
        "name": "颜色记忆游戏 - 小苏趣研AI",
        "description": "颜色记忆游戏 - 小苏趣研AI",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "颜",
        "url": "./tools/color-memory/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 235,
        "name": "批量图片重命名工具",
        "description": "批量图片重命名工具",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "批",
        "url": "./tools/rename-batch-pic/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 236,
        "name": "图片线稿生成工具",
        "description": "图片线稿生成工具",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片", "生成器"],
        "icon": "图",
        "url": "./tools/image-to-line-style/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 237,
        "name": "网页截图工具",
        "description": "网页截图工具",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "网",
        "url": "./tools/web-snapshot/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 238,
        "name": "像素风头像生成器",
        "description": "像素风头像生成器",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片", "生成器"],
        "icon": "像",
        "url": "./tools/pixel-avatar-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 239,
        "name": "图片信息查看器 - 小苏趣研AI",
        "description": "图片信息查看器 - 小苏趣研AI",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "图",
        "url": "./tools/image-info/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 240,
        "name": "黑客帝国数字雨",
        "description": "黑客帝国数字雨",
        "category": "learning",
        "tags": ["迁移工具", "学习", "教育"],
        "icon": "黑",
        "url": "./tools/the-matrix-rain/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 241,
        "name": "记忆力训练游戏 - Memory Trainer",
        "description": "记忆力训练游戏 - Memory Trainer",
        "category": "learning",
        "tags": ["迁移工具", "学习", "教育"],
        "icon": "记",
        "url": "./tools/memory-trainer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 242,
        "name": "打字速度测试 - Typing Speed Test",
        "description": "打字速度测试 - Typing Speed Test",
        "category": "learning",
        "tags": ["迁移工具", "学习", "教育"],
        "icon": "打",
        "url": "./tools/typing-speed-test/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 243,
        "name": "化学元素周期表 - Interactive Periodic Table",
        "description": "化学元素周期表 - Interactive Periodic Table",
        "category": "learning",
        "tags": ["迁移工具", "学习", "教育"],
        "icon": "化",
        "url": "./tools/periodic-table/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 244,
        "name": "小学六年级必背诗词随机抽查系统",
        "description": "小学六年级必背诗词随机抽查系统",
        "category": "learning",
        "tags": ["迁移工具", "学习", "教育"],
        "icon": "小",
        "url": "./tools/poem-check/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 245,
        "name": "文本映射工具",
        "description": "文本映射工具",
        "category": "learning",
        "tags": ["迁移工具", "学习", "教育"],
        "icon": "文",
        "url": "./tools/text-mapping-tool/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 246,
        "name": "节假日倒计时工具",
        "description": "节假日倒计时工具",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "节",
        "url": "./tools/holiday-countdown/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 247,
        "name": "精美抽奖转盘",
        "description": "精美抽奖转盘",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "精",
        "url": "./tools/random-lottery/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 248,
        "name": "发电陀螺小工具",
        "description": "发电陀螺小工具",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "发",
        "url": "./tools/spin-tool/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 249,
        "name": "彩虹屁生成器 - Compliment Generator",
        "description": "彩虹屁生成器 - Compliment Generator",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用", "生成器"],
        "icon": "彩",
        "url": "./tools/compliment-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 250,
        "name": "人生进度条 - Life Progress Bar",
        "description": "人生进度条 - Life Progress Bar",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "人",
        "url": "./tools/life-progress-bar/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 251,
        "name": "我们的足迹地图 - Our Footprints Map",
        "description": "我们的足迹地图 - Our Footprints Map",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "我",
        "url": "./tools/our-footprints-map/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 252,
        "name": "未来信件邮局 - Future Letter Post Office",
        "description": "未来信件邮局 - Future Letter Post Office",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "未",
        "url": "./tools/future-letter-post-office/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 253,
        "name": "\"断舍离\"决策器 - Decluttering Decision Maker",
        "description": "\"断舍离\"决策器 - Decluttering Decision Maker",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "\"",
        "url": "./tools/decluttering-decision-maker/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 254,
        "name": "多人随机分组器",
        "description": "多人随机分组器",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "多",
        "url": "./tools/random-group/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 255,
        "name": "AI主题小红书海报",
        "description": "AI主题小红书海报",
        "category": "pdf",
        "tags": ["迁移工具", "PDF", "文档"],
        "icon": "A",
        "url": "./tools/rednote-post/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 1
    },
    {
        "id": 256,
        "name": "简易习惯打卡器 - Simple Habit Tracker",
        "description": "简易习惯打卡器 - Simple Habit Tracker",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "简",
        "url": "./tools/simple-habit-tracker/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 257,
        "name": "会议发言计时器 - Meeting Speech Timer",
        "description": "会议发言计时器 - Meeting Speech Timer",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "会",
        "url": "./tools/meeting-speech-timer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 258,
        "name": "番茄时钟",
        "description": "番茄时钟",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "番",
        "url": "./tools/tomato-clock/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 259,
        "name": "每日习惯追踪器",
        "description": "每日习惯追踪器",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "每",
        "url": "./tools/daily-habit-tracker/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 260,
        "name": "在线便签贴/白板",
        "description": "在线便签贴/白板",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "在",
        "url": "./tools/sticky-whiteboard/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 261,
        "name": "Excel组织架构图生成器",
        "description": "Excel组织架构图生成器",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力", "生成器"],
        "icon": "E",
        "url": "./tools/org-chart-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 262,
        "name": "副业规划管理器 - Side Business Planner",
        "description": "副业规划管理器 - Side Business Planner",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "副",
        "url": "./tools/side-business-planner/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 263,
        "name": "只管去做 - 年度目标制定系统",
        "description": "只管去做 - 年度目标制定系统",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "只",
        "url": "./tools/annual-goal-planner/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 264,
        "name": "小强升职记 - GTD时间管理系统",
        "description": "小强升职记 - GTD时间管理系统",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "小",
        "url": "./tools/xiaoqiang-time-management/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 265,
        "name": "在场证明生成器",
        "description": "在场证明生成器",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具", "生成器"],
        "icon": "在",
        "url": "./tools/check-snapshot/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 266,
        "name": "自定义键盘布局测试器",
        "description": "自定义键盘布局测试器",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "自",
        "url": "./tools/keyboard-tester/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 267,
        "name": "网页屏幕录制器",
        "description": "网页屏幕录制器",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "网",
        "url": "./tools/screen-recorder/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 268,
        "name": "简易画廊/图片查看器",
        "description": "简易画廊/图片查看器",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "简",
        "url": "./tools/gallery-viewer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 269,
        "name": "屏幕分辨率检测器 - 小苏趣研AI",
        "description": "屏幕分辨率检测器 - 小苏趣研AI",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "屏",
        "url": "./tools/resolution-detector/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 4
    },
    {
        "id": 270,
        "name": "文本差异比较工具",
        "description": "文本差异比较工具",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字"],
        "icon": "文",
        "url": "./tools/text-compare-diff/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 2
    },
    {
        "id": 272,
        "name": "文本格式转换器",
        "description": "文本格式转换器",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字", "转换器"],
        "icon": "文",
        "url": "./tools/text-transfer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 273,
        "name": "文章目录生成器 - Table of Contents Generator",
        "description": "文章目录生成器 - Table of Contents Generator",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字", "生成器"],
        "icon": "文",
        "url": "./tools/toc-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 274,
        "name": "文字云生成器",
        "description": "文字云生成器",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字", "生成器"],
        "icon": "文",
        "url": "./tools/word-cloud-create/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 275,
        "name": "打字特效游乐场",
        "description": "打字特效游乐场",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字"],
        "icon": "打",
        "url": "./tools/word-type-effect/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 276,
        "name": "倒放文字生成器",
        "description": "倒放文字生成器",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字", "生成器"],
        "icon": "倒",
        "url": "./tools/reverse-text/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 3
    },
    {
        "id": 277,
        "name": "文本摘要工具 - 小苏趣研AI",
        "description": "文本摘要工具 - 小苏趣研AI",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字"],
        "icon": "文",
        "url": "./tools/text-summarizer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 5
    },
    {
        "id": 278,
        "name": "文字转ASCII艺术",
        "description": "文字转ASCII艺术",
        "category": "text",
        "tags": ["迁移工具", "文本", "文字"],
        "icon": "文",
        "url": "./tools/ascii-art/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 6
    },
    {
        "id": 279,
        "name": "新零售中心组织结构图",
        "description": "新零售中心组织结构图",
        "category": "others",
        "tags": ["迁移工具", "效率", "生产力", "生成器"],
        "icon": "新",
        "url": "./tools/org-chart-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 10,
        "complexity": 7
    },
    {
        "id": 281,
        "name": "数字禅意花园 - Digital Zen Garden",
        "description": "数字禅意花园 - Digital Zen Garden",
        "category": "design",
        "tags": ["迁移工具", "设计", "创意"],
        "icon": "数",
        "url": "./tools/digital-zen-garden/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 9,
        "complexity": 7
    },
    {
        "id": 282,
        "name": "九宫格图片切分工具",
        "description": "九宫格图片切分工具",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "九",
        "url": "./tools/nine-square-split/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 9,
        "complexity": 7
    },
    {
        "id": 283,
        "name": "小红书图片转PDF工具",
        "description": "小红书图片转PDF工具",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "小",
        "url": "./tools/rednote-image2pdf/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 9,
        "complexity": 7
    },
    {
        "id": 284,
        "name": "Favicon 生成器",
        "description": "Favicon 生成器",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片", "生成器"],
        "icon": "F",
        "url": "./tools/favicon-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 9,
        "complexity": 8
    },
    {
        "id": 285,
        "name": "视觉计时沙漏 - 小苏趣研AI",
        "description": "视觉计时沙漏 - 小苏趣研AI",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "视",
        "url": "./tools/sand-timer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 9,
        "complexity": 5
    },
    {
        "id": 286,
        "name": "PDF 水印移除工具",
        "description": "PDF 水印移除工具",
        "category": "pdf",
        "tags": ["迁移工具", "PDF", "文档"],
        "icon": "P",
        "url": "./tools/pdf-watermark-remover/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 9,
        "complexity": 7
    },
    {
        "id": 287,
        "name": "打地鼠游戏",
        "description": "打地鼠游戏",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "打",
        "url": "./tools/whack-a-mole/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 5
    },
    {
        "id": 288,
        "name": "迷宫生成器",
        "description": "迷宫生成器",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐", "生成器"],
        "icon": "迷",
        "url": "./tools/maze-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 7
    },
    {
        "id": 289,
        "name": "亮灯解谜游戏",
        "description": "亮灯解谜游戏",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "亮",
        "url": "./tools/light-up-puzzle/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 5
    },
    {
        "id": 290,
        "name": "图片压缩器",
        "description": "图片压缩器",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "图",
        "url": "./tools/image-zip/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 8
    },
    {
        "id": 291,
        "name": "图片颜色提取器",
        "description": "图片颜色提取器",
        "category": "image",
        "tags": ["迁移工具", "图像", "图片"],
        "icon": "图",
        "url": "./tools/image-palette/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 8
    },
    {
        "id": 292,
        "name": "滑稽证件生成器",
        "description": "滑稽证件生成器",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用", "生成器"],
        "icon": "滑",
        "url": "./tools/funny-certificate-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 7
    },
    {
        "id": 293,
        "name": "DIY表情包制作器 - Meme Generator",
        "description": "DIY表情包制作器 - Meme Generator",
        "category": "lifestyle",
        "tags": ["迁移工具", "生活", "实用"],
        "icon": "D",
        "url": "./tools/meme-generator/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 6
    },
    {
        "id": 294,
        "name": "目标管理工具",
        "description": "目标管理工具",
        "category": "productivity",
        "tags": ["迁移工具", "效率", "生产力"],
        "icon": "目",
        "url": "./tools/goal-management-tofix/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 9
    },
    {
        "id": 295,
        "name": "设备信息查看器 - My Device Info",
        "description": "设备信息查看器 - My Device Info",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "设",
        "url": "./tools/my-device-info/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 8,
        "complexity": 8
    },
    {
        "id": 296,
        "name": "数字泡泡膜解压神器",
        "description": "数字泡泡膜解压神器",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "数",
        "url": "./tools/bubble-wrap/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 7,
        "complexity": 7
    },
    {
        "id": 297,
        "name": "音频可视化器",
        "description": "音频可视化器",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "音",
        "url": "./tools/audio-visualizer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 7,
        "complexity": 9
    },
    {
        "id": 298,
        "name": "屏幕破裂效果 - 小苏趣研AI",
        "description": "屏幕破裂效果 - 小苏趣研AI",
        "category": "system",
        "tags": ["迁移工具", "系统", "工具"],
        "icon": "屏",
        "url": "./tools/screen-crack/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 7,
        "complexity": 9
    },
    {
        "id": 299,
        "name": "简易平台跳跃游戏",
        "description": "简易平台跳跃游戏",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "简",
        "url": "./tools/simple-platformer/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 6,
        "complexity": 7
    },
    {
        "id": 300,
        "name": "找不同小游戏 - 小苏趣研AI",
        "description": "找不同小游戏 - 小苏趣研AI",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "找",
        "url": "./tools/spot-difference/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 6,
        "complexity": 7
    },
    {
        "id": 301,
        "name": "简易拼图游戏",
        "description": "简易拼图游戏",
        "category": "games",
        "tags": ["迁移工具", "游戏", "娱乐"],
        "icon": "简",
        "url": "./tools/jigsaw-puzzle/",
        "is_local": True,
        "is_original": False,
        "is_migrated": True,
        "priority": 5,
        "complexity": 8
    },
]
