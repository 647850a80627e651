"""
Module for answering questions grounded in a transcript using LLM models.
"""

import os
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from transcript_assistant.config import config
from transcript_assistant.core.prompts import qa_system_template, qa_user_template
from transcript_assistant.models.schemas import QAConfig
from transcript_assistant.utils.logger import logging


class TranscriptQA:
    """Class to handle question answering over a transcript."""

    def __init__(self, qa_config: Optional[QAConfig] = None, api_key: Optional[str] = None):
        """
        Initialize the QA service with API key.

        Args:
            qa_config: Chat model settings (defaults to QAConfig())
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.qa_config = qa_config or QAConfig()
        self.api_key = api_key or os.getenv("GROQ_API_KEY") or config.GROQ_API_KEY
        if not self.api_key:
            raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

        self.prompt = ChatPromptTemplate.from_messages([
            ("system", qa_system_template),
            ("human", qa_user_template),
        ])

    def _init_llm(self):
        model_kwargs = {"api_key": self.api_key}
        if self.qa_config.temperature is not None:
            model_kwargs["temperature"] = self.qa_config.temperature
        if self.qa_config.max_tokens is not None:
            model_kwargs["max_tokens"] = self.qa_config.max_tokens

        return init_chat_model(
            model=self.qa_config.model,
            model_provider=self.qa_config.model_provider,
            **model_kwargs
        )

    def answer(self, question: str, transcript: str) -> str:
        """
        Answer a question using only the transcript as context.

        Args:
            question: The user's question
            transcript: Full transcript text

        Returns:
            Markdown answer, or an empty string if the model returned nothing
        """
        if not question or not question.strip():
            raise ValueError("Question must not be empty")
        if not transcript or not transcript.strip():
            raise ValueError("Transcript must not be empty")

        logging.info(f"Answering question with {self.qa_config.model} "
                     f"(transcript length: {len(transcript)})")

        messages = self.prompt.format_messages(transcript=transcript, question=question)
        response = self._init_llm().invoke(messages)

        return getattr(response, "content", None) or ""
