"""
Pydantic Evals 回归测试数据集：新建客户对话的字段提取与完整性判定。

通过预设 Case 验证模型表现，改提示词或换模型后跑一遍即可发现退化。
输入均为用户首轮的一句话（已确认字段为空）。
"""
from __future__ import annotations

from pydantic_evals import Case, Dataset
from pydantic_evals.evaluators import EqualsExpected


def intake_name_dataset() -> Dataset:
    """姓名提取：一句话里混有公司、联系方式，期望准确拆出姓名。"""
    return Dataset(
        name="intake_name",
        cases=[
            Case(
                inputs="张三，ABC公司，13800138000",
                expected_output="张三",
                name="name_phone",
            ),
            Case(
                inputs="客户叫李四，在星海科技做采购经理，微信是 lisi_88",
                expected_output="李四",
                name="name_wechat",
            ),
            Case(
                inputs="王五 / 远航物流 / wangwu@yuanhang.cn，预算大概二十万",
                expected_output="王五",
                name="name_email_budget",
            ),
        ],
        evaluators=[EqualsExpected()],
    )


def intake_readiness_dataset() -> Dataset:
    """完整性判定：信息齐全时应可直接确认，缺联系方式或公司时不可。"""
    return Dataset(
        name="intake_readiness",
        cases=[
            Case(
                inputs="张三，ABC公司，13800138000",
                expected_output=True,
                name="ready_with_phone",
            ),
            Case(
                inputs="李四，星海科技，邮箱 lisi@xinghai.com",
                expected_output=True,
                name="ready_with_email",
            ),
            Case(
                inputs="张三，ABC公司的 CTO",
                expected_output=False,
                name="missing_contact",
            ),
            Case(
                inputs="我想录一个客户，电话 13900139000",
                expected_output=False,
                name="missing_name_company",
            ),
        ],
        evaluators=[EqualsExpected()],
    )
