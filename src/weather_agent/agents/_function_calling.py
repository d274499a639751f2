"""Bounded function-calling loop."""

from __future__ import annotations

import logging
from typing import Any

from weather_agent.agents._base import (
    EXHAUSTED_MESSAGE,
    AgentConfig,
    AgentResult,
    AgentState,
    AgentStep,
    _accumulate_usage,
    _fire_event,
)
from weather_agent.agents._transcript import Transcript
from weather_agent.llm._types import (
    FINISH_STOP,
    FINISH_TOOL_CALLS,
    Message,
    Response,
    ToolCall,
    ToolResult,
    Usage,
)

logger = logging.getLogger(__name__)


class FunctionCallingAgent:
    """Agent that lets the model call local tools until it produces an answer.

    Each iteration sends the whole transcript and the tool descriptions to
    the model, then branches on the finish reason:

    1. ``tool_calls``: append the assistant turn, run the *first* requested
       tool through the registry and append its JSON result. Any further
       calls in the same response are not dispatched.
    2. ``stop``: append the assistant turn and return its content.
    3. Anything else: append nothing and ask the model again.

    After ``config.max_iterations`` model calls without an answer the run
    ends in ``EXHAUSTED`` with a fixed advisory message. Errors from the
    client or a tool are not caught.
    """

    def __init__(self, client: Any, tools: Any, *, config: AgentConfig | None = None) -> None:
        self.client = client
        self.tools = tools
        self.config = config or AgentConfig()

    def _start(self, user_input: str, transcript: Transcript | None) -> Transcript:
        if transcript is None:
            transcript = Transcript.with_system(self.config.system)
        transcript.append(Message(role="user", content=user_input))
        return transcript

    @staticmethod
    def _next_state(response: Response) -> AgentState:
        if response.stop_reason == FINISH_TOOL_CALLS and response.tool_calls:
            return AgentState.DISPATCHING_TOOL
        if response.stop_reason == FINISH_STOP:
            return AgentState.DONE
        return AgentState.AWAITING_MODEL

    def _request_tool(self, transcript: Transcript, response: Response, step_num: int) -> ToolCall:
        """Record the assistant turn and pick the tool call to dispatch."""
        transcript.append(response.to_message())
        tool_call = response.tool_calls[0]
        if len(response.tool_calls) > 1:
            logger.info(
                "Model requested %d tool calls; dispatching only %s",
                len(response.tool_calls),
                tool_call.name,
            )
        logger.info("Dispatching tool %s with %s", tool_call.name, tool_call.arguments)
        _fire_event(
            self.config,
            "tool_call",
            step_number=step_num,
            tool_name=tool_call.name,
            tool_args=dict(tool_call.arguments),
        )
        return tool_call

    def _record_tool_result(
        self, transcript: Transcript, tool_result: ToolResult, step_num: int
    ) -> None:
        transcript.append(tool_result)
        _fire_event(
            self.config,
            "tool_result",
            step_number=step_num,
            tool_name=tool_result.name,
            result=tool_result.content,
        )

    def _skip(self, response: Response, step_num: int) -> None:
        logger.warning(
            "Unhandled finish reason %r at step %d; asking the model again",
            response.stop_reason,
            step_num,
        )

    def _done(
        self,
        transcript: Transcript,
        response: Response,
        steps: list[AgentStep],
        step_num: int,
        total_usage: Usage,
    ) -> AgentResult:
        transcript.append(response.to_message())
        steps.append(AgentStep(step_number=step_num, response=response))
        _fire_event(self.config, "step_end", step_number=step_num)
        _fire_event(self.config, "done", step_number=step_num, result=response.text)
        logger.info("Final answer after %d step(s)", step_num)
        return AgentResult(
            answer=response.text,
            state=AgentState.DONE,
            transcript=transcript,
            steps=tuple(steps),
            total_usage=total_usage,
        )

    def _exhausted(
        self, transcript: Transcript, steps: list[AgentStep], total_usage: Usage
    ) -> AgentResult:
        logger.info("No answer after %d iteration(s)", self.config.max_iterations)
        _fire_event(self.config, "exhausted", step_number=self.config.max_iterations)
        return AgentResult(
            answer=EXHAUSTED_MESSAGE,
            state=AgentState.EXHAUSTED,
            transcript=transcript,
            steps=tuple(steps),
            total_usage=total_usage,
        )

    def run(
        self, user_input: str, transcript: Transcript | None = None, **kwargs: Any
    ) -> AgentResult:
        """Run the loop for one user message.

        A new transcript seeded with the configured system prompt is created
        when none is given. The transcript is returned on the result.
        """
        transcript = self._start(user_input, transcript)
        steps: list[AgentStep] = []
        total_usage = Usage()

        for step_num in range(1, self.config.max_iterations + 1):
            _fire_event(self.config, "step_start", step_number=step_num)

            response = self.client.chat(transcript, tools=self.tools.describe() or None, **kwargs)
            total_usage = _accumulate_usage(total_usage, response.usage)
            state = self._next_state(response)

            if state is AgentState.DONE:
                return self._done(transcript, response, steps, step_num, total_usage)

            if state is AgentState.DISPATCHING_TOOL:
                tool_call = self._request_tool(transcript, response, step_num)
                tool_result = self.tools.execute(tool_call)
                self._record_tool_result(transcript, tool_result, step_num)
                steps.append(
                    AgentStep(
                        step_number=step_num,
                        response=response,
                        tool_call=tool_call,
                        tool_result=tool_result,
                    )
                )
            else:
                self._skip(response, step_num)
                steps.append(AgentStep(step_number=step_num, response=response))

            _fire_event(self.config, "step_end", step_number=step_num)

        return self._exhausted(transcript, steps, total_usage)

    async def async_run(
        self, user_input: str, transcript: Transcript | None = None, **kwargs: Any
    ) -> AgentResult:
        """Run the loop for one user message against an async client."""
        transcript = self._start(user_input, transcript)
        steps: list[AgentStep] = []
        total_usage = Usage()

        for step_num in range(1, self.config.max_iterations + 1):
            _fire_event(self.config, "step_start", step_number=step_num)

            response = await self.client.chat(
                transcript, tools=self.tools.describe() or None, **kwargs
            )
            total_usage = _accumulate_usage(total_usage, response.usage)
            state = self._next_state(response)

            if state is AgentState.DONE:
                return self._done(transcript, response, steps, step_num, total_usage)

            if state is AgentState.DISPATCHING_TOOL:
                tool_call = self._request_tool(transcript, response, step_num)
                tool_result = await self.tools.async_execute(tool_call)
                self._record_tool_result(transcript, tool_result, step_num)
                steps.append(
                    AgentStep(
                        step_number=step_num,
                        response=response,
                        tool_call=tool_call,
                        tool_result=tool_result,
                    )
                )
            else:
                self._skip(response, step_num)
                steps.append(AgentStep(step_number=step_num, response=response))

            _fire_event(self.config, "step_end", step_number=step_num)

        return self._exhausted(transcript, steps, total_usage)
