"""
回归数据集本身的结构检查（不调用模型）；数据集的任务函数用假模型跑通一遍。
"""
from conftest import FakeChatClient, model_reply, user
from nextcrm.evals import intake_name_dataset, intake_readiness_dataset
from nextcrm.intake import handle_turn


def test_name_dataset_cases():
    ds = intake_name_dataset()
    assert ds.name == "intake_name"
    assert len(ds.cases) == 3
    assert all(isinstance(c.expected_output, str) and c.expected_output for c in ds.cases)


def test_readiness_dataset_has_both_outcomes():
    ds = intake_readiness_dataset()
    outcomes = {c.expected_output for c in ds.cases}
    assert outcomes == {True, False}


def test_readiness_case_with_fake_model():
    """ready_with_phone 用例：模型正确提取时，后端判定应与期望一致。"""
    case = next(c for c in intake_readiness_dataset().cases if c.name == "ready_with_phone")
    fake = FakeChatClient(model_reply("请确认", '{"name":"张三","company":"ABC公司","phone":"13800138000"}'))
    result = handle_turn([user(case.inputs)], {}, client=fake)
    assert result.ready is case.expected_output
