"""
AI Interviewer Prompt Templates

Contains prompts for interview question generation and the local
question set served when no provider is available.

The question parser reads numbered lines as questions and lines
mentioning "answer" as reference answers, so both the prompt and the
fallback text ask for that layout.
"""


class InterviewerPrompts:
    """
    Prompt templates for the interview question generator.

    Key principles:
    - Mix technical and behavioral questions
    - One numbered question per line
    - A short reference answer under each question
    """

    SYSTEM_CONTEXT = """You are an interview preparation expert.

Generate relevant interview questions for the specified career role,
considering the candidate's skills. Include both technical and behavioral
questions and provide a concise reference answer for each one.

Format:
1. <question>
Answer: <concise reference answer>
"""

    QUESTION_COUNT = 10

    def question_generation_prompt(self, job_role: str, skills: list[str]) -> str:
        """Build the user message for question generation."""
        skills_str = ", ".join(skills) if skills else "Not specified"
        return (
            f"Career Role: {job_role}\n"
            f"Skills: {skills_str}\n"
            f"Number of questions: {self.QUESTION_COUNT}"
        )

    def full_prompt(self, job_role: str, skills: list[str]) -> str:
        """System context and user message as a single prompt."""
        return f"{self.SYSTEM_CONTEXT}\n{self.question_generation_prompt(job_role, skills)}"

    def fallback_questions(self, job_role: str, skills: list[str]) -> str:
        """Question set used when no AI provider is configured or reachable."""
        first_skill = skills[0] if skills else "relevant technologies"
        second_skill = skills[1] if len(skills) > 1 else "your main skill"

        return f"""1. Describe your experience with {first_skill} and how you've applied it in projects.
Answer: Name concrete projects, the problems {first_skill} solved and the measurable results.
2. What challenges have you faced when working with {second_skill} and how did you overcome them?
Answer: Pick one specific challenge, explain the root cause, the fix and what you learned.
3. How would you design a database schema for a system you have built before?
Answer: Cover entities, relationships, indexing, normalization trade-offs and expected load.
4. Walk me through your process for debugging a complex technical issue in production.
Answer: Reproduce, gather logs and metrics, isolate the cause, fix, verify and add monitoring.
5. Tell me about a time you had to work with a difficult team member. How did you handle it?
Answer: Use the STAR method: situation, task, action and result, focusing on communication.
6. Describe a project where you had to learn something completely new. How did you approach it?
Answer: Explain how you broke the topic down, the resources you used and how you applied it.
7. Give an example of a tight deadline you had to meet. How did you manage your priorities?
Answer: Show how you scoped work, communicated trade-offs and delivered the most important parts.
8. Tell me about a mistake you made in a previous role and what you learned from it.
Answer: Own the mistake, describe the impact, the recovery and the process change that followed.
9. Why are you interested in working as a {job_role}? What motivates you about this role?
Answer: Connect your skills and interests to the responsibilities and impact of the role.
10. Where do you see yourself in five years, and how does this position fit your career goals?
Answer: Describe a realistic growth path and how this role builds the skills you need."""
