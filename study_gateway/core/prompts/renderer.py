"""
Prompt rendering.

Turns a ChatPromptTemplate into the ChatMessage list sent to the gateway.

Dependencies: langchain_core.prompts, study_gateway.models
System role: Bridge between prompt templates and completion requests
"""

from langchain_core.prompts import ChatPromptTemplate

from study_gateway.models.chat import ChatMessage, ChatRole

_ROLE_BY_MESSAGE_TYPE = {
    "system": ChatRole.SYSTEM,
    "human": ChatRole.USER,
    "ai": ChatRole.ASSISTANT,
}


def render_messages(template: ChatPromptTemplate, **variables) -> list[ChatMessage]:
    """
    Render a prompt template into chat messages.

    Args:
        template: Prompt template with system/human messages
        **variables: Template variables

    Returns:
        list[ChatMessage]: Messages in template order
    """
    prompt_value = template.invoke(variables)
    return [
        ChatMessage(role=_ROLE_BY_MESSAGE_TYPE[message.type], content=message.content)
        for message in prompt_value.to_messages()
    ]
