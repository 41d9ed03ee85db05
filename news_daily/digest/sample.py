"""数据缺失时使用的固定示例日报"""

from .models import NewsDocument

_AGENT_FRAMEWORKS_URL = (
    "https://uplatz.com/blog/a-comparative-architectural-analysis-of-llm-agent-frameworks-"
    "langchain-llamaindex-and-autogpt-in-2025/"
)


def build_sample_document(date_key: str) -> NewsDocument:
    """
    构造示例日报，内容固定，只有截图路径里带上日期

    Args:
        date_key: YYYY-MM-DD
    """
    screenshots = f"/screenshots/{date_key}"
    return NewsDocument.model_validate(
        {
            "date": date_key,
            "insights": [
                {
                    "title": "Andrej Karpathy: 2025 LLM 年度回顾",
                    "author": "@karpathy",
                    "date": "2025年12月19日",
                    "summary": "Karpathy 发布 '2025 LLM Year in Review'，总结了过去一年的重要范式变化。",
                    "link": "https://x.com/karpathy/status/2002118205729562949",
                    "screenshot": f"{screenshots}/core_1_karpathy_2025.png",
                },
                {
                    "title": "Sam Altman: GPT-4.5 和 GPT-5 路线图更新",
                    "author": "@sama",
                    "date": "2025年",
                    "summary": "OpenAI CEO 分享产品路线图简化计划，GPT-5 将整合 o3 技术。",
                    "link": "https://x.com/sama/status/1889755723078443244",
                    "screenshot": f"{screenshots}/core_2_sama_roadmap.png",
                },
                {
                    "title": "Yann LeCun: Meta Code World Model (CWM)",
                    "author": "@ylecun",
                    "date": "2025年3月",
                    "summary": "Meta 首席 AI 科学家发布 320 亿参数的 CWM 模型，通过代理推理改进代码生成。",
                    "link": "https://x.com/ylecun/status/1970967341052854748",
                    "screenshot": f"{screenshots}/core_3_ylecun_codeworldmodel.png",
                },
            ],
            "newsletters": [
                {
                    "title": "Latent Space",
                    "source": "swyx & Alessio",
                    "summary": "AI 工程师圈内质量极高的 Newsletter。",
                    "link": "https://latent.space/",
                },
                {
                    "title": "The Batch",
                    "source": "DeepLearning.AI",
                    "summary": "Andrew Ng 主编的 AI 周刊。",
                    "link": "https://www.deeplearning.ai/the-batch/",
                },
                {
                    "title": "Ahead of AI",
                    "source": "Sebastian Raschka",
                    "summary": "学术研究与工业应用平衡的 AI 研究通讯。",
                    "link": "https://sebastianraschka.com/newsletter/",
                },
            ],
            "papers": [
                {
                    "title": "SmolVLM: 紧凑型多模态模型",
                    "authors": "Stanford & Hugging Face",
                    "summary": "MIT 与 Hugging Face 联合发布的资源高效推理多模态模型。",
                    "link": "https://huggingface.co/papers/2504.05299",
                },
                {
                    "title": "Qwen2.5-32B 后训练管道",
                    "authors": "Alibaba DAMO Academy",
                    "summary": "基于公开数据训练，在 AIME 2025 达到 74.4% 准确率。",
                    "link": "https://github.com/dair-ai/ML-Papers-of-the-Week",
                },
            ],
            "xPosts": [
                {
                    "title": "OpenAI: GPT-5.2 正式发布",
                    "author": "@OpenAI",
                    "date": "2025年12月11日",
                    "summary": "GPT-5.2 版本现已向所有用户推出。",
                    "link": "https://x.com/OpenAI/status/1999182098859700363",
                    "screenshot": f"{screenshots}/x_1_openai_gpt52.png",
                },
                {
                    "title": "DeepSeek: V3.2-Exp 实验版发布",
                    "author": "@DeepSeekAI",
                    "date": "2025年",
                    "summary": "引入 DeepSeek Sparse Attention，API 价格下调 50%+。",
                    "link": "https://x.com/deepseek_ai/status/1972604768309871061",
                    "screenshot": f"{screenshots}/x_2_deepseek_v32.png",
                },
            ],
            "discord": [
                {
                    "title": "LangChain 2025 年架构演进",
                    "source": "LangChain Discord",
                    "summary": "LangChain 在 2025 年的架构演进使多代理范式成为可能。",
                    "link": _AGENT_FRAMEWORKS_URL,
                },
            ],
            "github": [
                {
                    "name": "Claude Code",
                    "description": "Anthropic 的 AI 编程助手。",
                    "stars": "新发布",
                    "link": "https://github.com/anthropics/claude-code",
                },
                {
                    "name": "llama.cpp",
                    "description": "轻量级 LLM 推理框架。",
                    "stars": "78,000+",
                    "link": "https://github.com/ggerganov/llama.cpp",
                },
                {
                    "name": "AutoGPT",
                    "description": "自主 AI Agent 框架。",
                    "stars": "150,000+",
                    "link": "https://github.com/Significant-Gravitas/AutoGPT",
                },
            ],
            "hn": [
                {
                    "title": "Karpathy 的 2025 LLM 年度回顾引发热议",
                    "summary": "Andrej Karpathy 的年度回顾文章在 HN 引发广泛讨论。",
                    "link": "https://news.ycombinator.com/",
                },
            ],
            "reddit": [
                {
                    "title": "r/mlscaling: 2025 LLM 年度回顾",
                    "author": "r/mlscaling",
                    "summary": "ML/AI/DL 研究社区讨论 Karpathy 的年度总结。",
                    "link": "https://www.reddit.com/r/mlscaling/comments/1pr3o60/2025_llm_year_in_review_andrej_karpathy/",
                },
            ],
            "tools": [
                {
                    "name": "Claude Code",
                    "description": "Anthropic 发布的 AI 编程助手。",
                    "link": "https://claude.com/code",
                },
                {
                    "name": "SmolVLM",
                    "description": "轻量级多模态模型。",
                    "link": "https://huggingface.co/smolvlm",
                },
            ],
            "agent": [
                {
                    "title": "2025 年 Agent 架构演进",
                    "summary": "LangChain、LlamaIndex、AutoGPT 三大框架在 2025 年的架构演进。",
                    "link": _AGENT_FRAMEWORKS_URL,
                },
            ],
            "valley": [
                {
                    "title": "OpenAI 产品线简化",
                    "summary": "OpenAI 宣布简化 GPT-4.5 和 GPT-5 产品线。",
                    "link": "https://x.com/sama/status/1889755723078443244",
                },
            ],
            "china": [
                {
                    "title": "DeepSeek 引爆全球开源社区",
                    "summary": "DeepSeek 在 2025 年引发全球关注。",
                    "link": "https://medium.com/@ant-oss/open-source-llm-development-2025-landscape-trends-and-insights-4e821bceba68",
                },
            ],
        }
    )
